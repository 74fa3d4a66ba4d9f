from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings


class ConversionDefaults(BaseModel):
    """Library defaults applied to every conversion before caller options."""

    model_config = ConfigDict(frozen=True)

    viewport_scale: float = 1.0
    output_file_mask: str = "buffer"
    disable_font_face: bool = True
    use_system_fonts: bool = False
    enable_xfa: bool = True
    strict_pages_to_process: bool = False
    # 0 = errors only, 1 = warnings, 5 = infos
    verbosity_level: int = 0


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_prefix": "PDFTOPNG_", "extra": "ignore"}

    # Conversion defaults (overridable per call through PdfToPngOptions)
    default_viewport_scale: float = 1.0
    default_output_file_mask: str = "buffer"
    default_disable_font_face: bool = True
    default_use_system_fonts: bool = False
    default_enable_xfa: bool = True
    default_verbosity_level: int = 0

    log_level: str = "INFO"

    # HTTP API
    max_upload_mb: int = 50
    # NOTE: keep this as string to avoid JSON decoding issues in pydantic-settings.
    #   PDFTOPNG_CORS_ORIGINS=http://localhost:8080,http://localhost:3000
    cors_origins: str = "http://localhost:8080,http://localhost:3000"

    def cors_origins_list(self) -> list[str]:
        return [s.strip() for s in self.cors_origins.split(",") if s.strip()]

    def conversion_defaults(self) -> ConversionDefaults:
        return ConversionDefaults(
            viewport_scale=self.default_viewport_scale,
            output_file_mask=self.default_output_file_mask,
            disable_font_face=self.default_disable_font_face,
            use_system_fonts=self.default_use_system_fonts,
            enable_xfa=self.default_enable_xfa,
            verbosity_level=self.default_verbosity_level,
        )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _normalize_cors_origins(cls, v: Any):
        if v is None:
            return ""
        if isinstance(v, list):
            return ",".join(str(x).strip() for x in v if str(x).strip())
        return str(v)

    @field_validator("default_viewport_scale")
    @classmethod
    def _positive_scale(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("default_viewport_scale must be > 0")
        return v


settings = Settings()
