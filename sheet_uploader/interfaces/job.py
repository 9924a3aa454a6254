"""Per-row job description handed to the uploader."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class JobDescriptor:
    """Everything needed to upload the media referenced by one sheet row."""

    file_path: str
    title: str
    description: str
    category_id: str
    keywords: str

    @property
    def tags(self) -> list[str]:
        """Return the comma separated keywords as a list.

        An empty list means the tag field must be left out of the request.
        """

        if not self.keywords.strip():
            return []
        return self.keywords.split(",")
