from __future__ import annotations

from dataclasses import dataclass
import logging
import os

SUPPORTED_LOCALES = ("en", "cy")
DEFAULT_SERVICE_URL = "https://www.court-tribunal-hearings.service.gov.uk"
DEFAULT_PDF_MAX_SIZE_BYTES = 2 * 1024 * 1024
SUPPORTED_PDF_PAGE_FORMATS = frozenset({"a4", "a4-l", "a3", "a3-l", "letter", "letter-l"})


@dataclass(frozen=True)
class Settings:
    environment: str
    default_locale: str
    pdf_page_format: str
    pdf_max_size_bytes: int
    service_url: str
    notify_template_id_subscription: str | None
    notify_template_id_subscription_with_pdf: str | None
    notify_template_id_subscription_with_summary: str | None
    log_level: str

    @property
    def hardened(self) -> bool:
        return self.environment.lower() in {"production", "prod", "ci"}


def parse_str_env(name: str, default: str | None = None) -> str | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip()
    if not normalized:
        return default
    return normalized


def parse_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer value, got {raw!r}") from exc


def load_settings() -> Settings:
    environment = parse_str_env("ENVIRONMENT", "development") or "development"
    hardened_environment = environment.lower() in {"production", "prod", "ci"}

    default_locale = (parse_str_env("DEFAULT_LOCALE", "en") or "en").lower()
    if default_locale not in SUPPORTED_LOCALES:
        raise ValueError("DEFAULT_LOCALE must be one of: en, cy")

    pdf_page_format = (parse_str_env("PDF_PAGE_FORMAT", "a4-l") or "a4-l").lower()
    if pdf_page_format not in SUPPORTED_PDF_PAGE_FORMATS:
        allowed = ", ".join(sorted(SUPPORTED_PDF_PAGE_FORMATS))
        raise ValueError(f"PDF_PAGE_FORMAT must be one of: {allowed}")

    pdf_max_size_bytes = parse_int_env("PDF_MAX_SIZE_BYTES", DEFAULT_PDF_MAX_SIZE_BYTES)
    if pdf_max_size_bytes < 1:
        raise ValueError("PDF_MAX_SIZE_BYTES must be >= 1")

    service_url = (parse_str_env("SERVICE_URL", DEFAULT_SERVICE_URL) or DEFAULT_SERVICE_URL).rstrip("/")
    if not service_url.startswith(("https://", "http://")):
        raise ValueError("SERVICE_URL must be an http(s) url")

    notify_template_id_subscription = parse_str_env("NOTIFY_TEMPLATE_ID_SUBSCRIPTION")
    if hardened_environment and not notify_template_id_subscription:
        raise ValueError(
            "NOTIFY_TEMPLATE_ID_SUBSCRIPTION is required when ENVIRONMENT is production/prod/ci"
        )

    log_level = (parse_str_env("LOG_LEVEL", "INFO") or "INFO").upper()
    if log_level not in logging.getLevelNamesMapping():
        raise ValueError(f"LOG_LEVEL must be a logging level name, got {log_level!r}")

    return Settings(
        environment=environment,
        default_locale=default_locale,
        pdf_page_format=pdf_page_format,
        pdf_max_size_bytes=pdf_max_size_bytes,
        service_url=service_url,
        notify_template_id_subscription=notify_template_id_subscription,
        notify_template_id_subscription_with_pdf=parse_str_env(
            "NOTIFY_TEMPLATE_ID_SUBSCRIPTION_WITH_PDF"
        ),
        notify_template_id_subscription_with_summary=parse_str_env(
            "NOTIFY_TEMPLATE_ID_SUBSCRIPTION_WITH_SUMMARY"
        ),
        log_level=log_level,
    )


def configure_logging(settings: Settings) -> None:
    logging.getLogger("hearing_lists").setLevel(settings.log_level)
