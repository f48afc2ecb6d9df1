# zodiac.py

import datetime
import logging
from enum import Enum
from types import MappingProxyType
from typing import List, NamedTuple, Union

from config import DATE_FORMAT, LABEL_LANGUAGE

logger = logging.getLogger(__name__)


class Sign(str, Enum):
    """Знаки тропического зодиака. Значение - текстовый идентификатор."""

    ARIES = "aries"
    TAURUS = "taurus"
    GEMINI = "gemini"
    CANCER = "cancer"
    LEO = "leo"
    VIRGO = "virgo"
    LIBRA = "libra"
    SCORPIO = "scorpio"
    SAGITTARIUS = "sagittarius"
    CAPRICORN = "capricorn"
    AQUARIUS = "aquarius"
    PISCES = "pisces"


class DateRange(NamedTuple):
    """Ежегодный интервал без года, обе границы включительно."""

    start_month: int
    start_day: int
    end_month: int
    end_day: int


class ZodiacTableError(RuntimeError):
    """Таблица диапазонов не покрывает дату. Ошибка программы, а не ввода."""


# Тропический зодиак. Козерог разбит на два диапазона на границе года.
ZODIAC_RANGES = (
    (DateRange(3, 21, 4, 19), Sign.ARIES),
    (DateRange(4, 20, 5, 20), Sign.TAURUS),
    (DateRange(5, 21, 6, 21), Sign.GEMINI),
    (DateRange(6, 22, 7, 22), Sign.CANCER),
    (DateRange(7, 23, 8, 22), Sign.LEO),
    (DateRange(8, 23, 9, 22), Sign.VIRGO),
    (DateRange(9, 23, 10, 23), Sign.LIBRA),
    (DateRange(10, 24, 11, 22), Sign.SCORPIO),
    (DateRange(11, 23, 12, 21), Sign.SAGITTARIUS),
    (DateRange(12, 22, 12, 31), Sign.CAPRICORN),
    (DateRange(1, 1, 1, 19), Sign.CAPRICORN),
    (DateRange(1, 20, 2, 18), Sign.AQUARIUS),
    (DateRange(2, 19, 3, 20), Sign.PISCES),
)

# Словарь подписей на китайском
ZODIAC_LABELS_ZH = MappingProxyType({
    "aries": "牡羊座",
    "taurus": "金牛座",
    "gemini": "双子座",
    "cancer": "巨蟹座",
    "leo": "狮子座",
    "virgo": "处女座",
    "libra": "天秤座",
    "scorpio": "天蝎座",
    "sagittarius": "射手座",
    "capricorn": "摩羯座",
    "aquarius": "水瓶座",
    "pisces": "双鱼座",
})

LABEL_TABLES = MappingProxyType({
    "zh": ZODIAC_LABELS_ZH,
})


def _to_date(value: datetime.date) -> datetime.date:
    # datetime является подклассом date: время и часовой пояс отбрасываются
    return datetime.date(value.year, value.month, value.day)


def classify_sign(value: datetime.date) -> Sign:
    """
    Определяет знак зодиака по календарной дате.

    Диапазоны привязываются к году входной даты при каждом вызове,
    поэтому 29 февраля обрабатывается без особых случаев.

    Args:
        value (datetime.date): Дата (или datetime, время игнорируется).

    Returns:
        Sign: Знак, диапазон которого содержит дату.

    Raises:
        ZodiacTableError: Если ни один диапазон не содержит дату.
    """
    day = _to_date(value)

    for date_range, sign in ZODIAC_RANGES:
        start = datetime.date(day.year, date_range.start_month, date_range.start_day)
        end = datetime.date(day.year, date_range.end_month, date_range.end_day)

        # Обе границы включительно, без выхода за date.max
        if start <= day <= end:
            return sign

    logger.critical("Для даты %s не найден знак зодиака", day.isoformat())
    raise ZodiacTableError(f"Birthdate doesn't have a zodiac sign: {day.isoformat()}")


def translate_sign(identifier: Union[Sign, str], language: str = LABEL_LANGUAGE) -> str:
    """
    Возвращает подпись знака на выбранном языке.

    Args:
        identifier: Знак или его текстовый идентификатор ("aries", ...).
        language (str): Ключ таблицы в LABEL_TABLES.

    Returns:
        str: Подпись или пустая строка, если перевод не найден.
    """
    if isinstance(identifier, Sign):
        key = identifier.value
    else:
        key = str(identifier).strip().lower()

    labels = LABEL_TABLES.get(language)
    if labels is None:
        logger.warning("Нет таблицы подписей для языка %r", language)
        return ""

    label = labels.get(key)
    if label is None:
        logger.warning("Неизвестный знак зодиака %r", identifier)
        return ""
    return label


def localized_sign(value: datetime.date) -> str:
    """Подпись знака зодиака для даты на языке из config.LABEL_LANGUAGE."""
    return translate_sign(classify_sign(value).value)


def sign_date_ranges(sign: Sign) -> List[DateRange]:
    """
    Возвращает диапазоны дат, относящиеся к знаку.

    Args:
        sign (Sign): Знак зодиака.

    Returns:
        List[DateRange]: Диапазоны в порядке таблицы (у Козерога их два).
    """
    return [date_range for date_range, owner in ZODIAC_RANGES if owner is sign]


def parse_birth_date(text: str) -> datetime.date:
    """
    Разбирает дату рождения из строки формата config.DATE_FORMAT.

    Raises:
        ValueError: Если строка не является корректной датой.
    """
    return datetime.datetime.strptime(text.strip(), DATE_FORMAT).date()
