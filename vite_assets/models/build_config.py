from pydantic import BaseModel, ConfigDict, Field


class BuildConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    out_dir: str = Field(alias="outDir")
    legacy: bool = False
