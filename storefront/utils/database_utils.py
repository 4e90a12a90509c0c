from datetime import datetime
from zoneinfo import ZoneInfo

from storefront.config.settings import TIMEZONE


def now_trimmed():
    """Current datetime in the shop timezone, without microseconds."""
    return datetime.now(ZoneInfo(TIMEZONE)).replace(microsecond=0)


def first_day_of_month(moment: datetime) -> datetime:
    return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
