from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TransformRequest(BaseModel):
    """Requested resize. ``None`` on either side means "preserve that dimension".

    Dimensions are not validated here: a non-numeric literal is carried as
    ``nan`` and rejected by the image processor.
    """

    model_config = ConfigDict(frozen=True)

    width: int | float | None = None
    height: int | float | None = None

    @property
    def has_dimensions(self) -> bool:
        return self.width is not None or self.height is not None
