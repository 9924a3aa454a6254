import colorama
from colorama import Fore, Style

colorama.init(autoreset=True)


def row_prefix(row_index: int) -> str:
    """Return the colored ``[row N]`` prefix used by concurrent workers."""
    return f"{Fore.BLUE}[row {row_index}]{Style.RESET_ALL}"


def youtube_url(prefix: str, video_id: str) -> str:
    """Return the public URL for ``video_id`` under ``prefix``."""
    return f"{prefix.rstrip('/')}/{video_id}"

__all__ = ["Fore", "Style", "row_prefix", "youtube_url"]
