from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class ContentPartType(str, Enum):
    """Kinds of message content parts."""
    TEXT = "text"
    IMAGE = "image"


class ImageSource(BaseModel):
    """Where the bytes of an image live: a URL or inline base64 data."""
    url: Optional[str] = None
    base64: Optional[str] = None

    @model_validator(mode="after")
    def check_exactly_one(self):
        if (self.url is None) == (self.base64 is None):
            raise ValueError("ImageSource requires exactly one of 'url' or 'base64'")
        return self


class ContentPart(BaseModel):
    """A single part of a message: text, or an image."""
    type: ContentPartType
    text: Optional[str] = None
    content_type: Optional[str] = None
    source: Optional[ImageSource] = None

    @classmethod
    def from_text(cls, text: str) -> "ContentPart":
        return cls(type=ContentPartType.TEXT, text=text)

    @classmethod
    def from_image_url(cls, url: str, content_type: str = "image/png") -> "ContentPart":
        return cls(type=ContentPartType.IMAGE, content_type=content_type, source=ImageSource(url=url))

    @classmethod
    def from_image_base64(cls, data: str, content_type: str = "image/png") -> "ContentPart":
        return cls(type=ContentPartType.IMAGE, content_type=content_type, source=ImageSource(base64=data))

    def is_text(self) -> bool:
        return self.type == ContentPartType.TEXT

    def is_image(self) -> bool:
        return self.type == ContentPartType.IMAGE


class MessageContent(BaseModel):
    """
    Content of a message as an ordered list of parts.

    Captured stream text is exposed through this type so callers see the same
    shape whether content came from a stream or a one-shot response.
    """
    parts: List[ContentPart] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "MessageContent":
        return cls(parts=[ContentPart.from_text(text)])

    @property
    def text(self) -> Optional[str]:
        """Concatenated text of all text parts, or None when there are none."""
        texts = [part.text for part in self.parts if part.is_text() and part.text is not None]
        if not texts:
            return None
        return "".join(texts)

    def first_text(self) -> Optional[str]:
        for part in self.parts:
            if part.is_text():
                return part.text
        return None

    def images(self) -> List[ContentPart]:
        return [part for part in self.parts if part.is_image()]

    def is_empty(self) -> bool:
        return not self.parts
