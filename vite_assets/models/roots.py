from typing import Optional

from pydantic import BaseModel, field_validator

from vite_assets.models.enums import RootKind


class Roots(BaseModel):
    """
    Filesystem roots of the hosting site. ``index`` is the public web root,
    ``base`` the project root for split deployments where the two differ.
    """

    index: str
    base: Optional[str] = None
    config: str

    @field_validator("base", mode="before")
    @classmethod
    def empty_base_is_none(cls, value):
        if value is None or (isinstance(value, str) and value.strip() == ""):
            return None
        return value

    def root_of(self, kind: RootKind) -> Optional[str]:
        return getattr(self, RootKind(kind).value)

    @property
    def effective_root(self) -> str:
        return self.base if self.base is not None else self.index
