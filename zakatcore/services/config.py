"""Configuration service for engine settings."""
import os

from zakatcore.constants import DEFAULT_GOLD_PRICE_PER_OUNCE, DEFAULT_SILVER_PRICE_PER_OUNCE
from zakatcore.data.methodologies import DEFAULT_METHODOLOGY_ID


def get_default_methodology_id() -> str:
    """Get the registry id used when a request names no methodology.

    Controlled by ZAKAT_DEFAULT_METHODOLOGY env var (default: bradford).
    """
    return os.environ.get('ZAKAT_DEFAULT_METHODOLOGY', DEFAULT_METHODOLOGY_ID)


def get_community_methodology_dir() -> str | None:
    """Get the directory of community methodology JSON documents, if configured."""
    return os.environ.get('ZAKAT_COMMUNITY_METHODOLOGY_DIR') or None


def get_default_silver_price() -> float:
    """Get the fallback silver price per ounce for callers that omit one.

    Controlled by ZAKAT_DEFAULT_SILVER_PRICE_PER_OUNCE env var.
    """
    return float(os.environ.get('ZAKAT_DEFAULT_SILVER_PRICE_PER_OUNCE', DEFAULT_SILVER_PRICE_PER_OUNCE))


def get_default_gold_price() -> float:
    """Get the fallback gold price per ounce for callers that omit one.

    Controlled by ZAKAT_DEFAULT_GOLD_PRICE_PER_OUNCE env var.
    """
    return float(os.environ.get('ZAKAT_DEFAULT_GOLD_PRICE_PER_OUNCE', DEFAULT_GOLD_PRICE_PER_OUNCE))


def get_log_level() -> str:
    return os.environ.get('LOG_LEVEL', 'INFO').upper()


def get_engine_config() -> dict:
    """Get complete engine configuration."""
    return {
        'default_methodology': get_default_methodology_id(),
        'community_methodology_dir': get_community_methodology_dir(),
        'default_silver_price_per_ounce': get_default_silver_price(),
        'default_gold_price_per_ounce': get_default_gold_price(),
        'log_level': get_log_level(),
    }
