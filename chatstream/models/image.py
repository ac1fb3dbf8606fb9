"""Image generation request and response models."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..providers.kinds import ModelIden
from .content import ContentPart
from .usage import Usage


class ImageRequest(BaseModel):
    """Request to generate images from a text prompt."""
    prompt: str = Field(..., description="Text description of the desired image(s)")
    n: Optional[int] = Field(None, ge=1, le=10, description="Number of images to generate")
    size: Optional[str] = Field(None, description='Image size, e.g. "1024x1024"')
    quality: Optional[str] = Field(None, description='"standard" or "hd"')
    style: Optional[str] = Field(None, description='"vivid" or "natural"')
    response_format: Optional[str] = Field(None, description='"url" or "b64_json"')

    @classmethod
    def from_prompt(cls, prompt: str) -> "ImageRequest":
        return cls(prompt=prompt)

    def with_n(self, n: int) -> "ImageRequest":
        return self.model_copy(update={"n": n})

    def with_size(self, size: str) -> "ImageRequest":
        return self.model_copy(update={"size": size})

    def with_quality(self, quality: str) -> "ImageRequest":
        return self.model_copy(update={"quality": quality})

    def with_style(self, style: str) -> "ImageRequest":
        return self.model_copy(update={"style": style})

    def with_response_format(self, response_format: str) -> "ImageRequest":
        return self.model_copy(update={"response_format": response_format})


class ImageResponse(BaseModel):
    """Generated images with the model that produced them."""
    model_config = ConfigDict(protected_namespaces=())

    images: List[ContentPart] = Field(default_factory=list)
    model_iden: ModelIden
    usage: Optional[Usage] = None
    captured_raw_body: Optional[Any] = None

    def first_image(self) -> Optional[ContentPart]:
        return self.images[0] if self.images else None

    def all_images(self) -> List[ContentPart]:
        return list(self.images)
