"""Blog Draft Value Object.

The author-supplied part of a blog, as received from the editor, before it
is validated and turned into a ``Blog`` entity.
"""

from dataclasses import dataclass, field
from typing import Any, List


@dataclass(frozen=True)
class BlogDraft:
    title: str = ""
    banner: str = ""
    des: str = ""
    content: List[Any] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    draft: bool = False

    def normalized_tags(self) -> List[str]:
        """Tags lower-cased, in their original order."""
        return [tag.lower() for tag in self.tags]
