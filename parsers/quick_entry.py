"""
parsers/quick_entry.py
----------------------
Keyword-based parser for quick transaction entry ("coffee 15", "راتب ٥٠٠٠").
Works offline in English, Arabic and Russian.
"""

import re
from dataclasses import dataclass
from typing import Optional

from models.transaction import TransactionType

# Arabic-Indic and Eastern Arabic-Indic digits
_AR_DIGITS = str.maketrans("٠١٢٣٤٥٦٧٨٩۰۱۲۳۴۵۶۷۸۹", "01234567890123456789")

_AMOUNT_RE = re.compile(r"\d[\d,]*(?:\.\d+)?")

_INCOME_RE = re.compile(
    r"salary|income|received|bonus|راتب|دخل|استلم|зарплата|доход|бонус",
    re.IGNORECASE,
)


def _keywords(latin: str, native: str) -> re.Pattern:
    """Latin words match whole words (optional plural s); Arabic and Cyrillic stems match anywhere."""
    return re.compile(rf"\b(?:{latin})s?\b|{native}", re.IGNORECASE)


# Checked in order; the first match wins.
CATEGORY_KEYWORDS: list[tuple[str, re.Pattern]] = [
    ("food", _keywords(
        r"food|eat|restaurant|lunch|dinner|breakfast|coffee|burger|pizza|sushi",
        r"أكل|مطعم|غداء|عشاء|قهوة|فطور|еда|ресторан|обед|ужин|кофе|завтрак")),
    ("transport", _keywords(
        r"uber|taxi|gas|fuel|metro|bus|car|petrol",
        r"مواصلات|بنزين|تاكسي|سيارة|باص|метро|такси|бензин|транспорт|машина|автобус")),
    ("shopping", _keywords(
        r"shop|shopping|buy|purchase|amazon|mall|clothes|shoes",
        r"تسوق|شراء|ملابس|أحذية|магазин|покупка|одежда|обувь|амазон")),
    ("entertainment", _keywords(
        r"movie|game|netflix|spotify|fun|cinema",
        r"فيلم|لعبة|سينما|ترفيه|кино|игра|развлечение|нетфликс")),
    ("health", _keywords(
        r"doctor|pharmacy|medicine|hospital|gym",
        r"دكتور|صيدلية|دواء|مستشفى|رياضة|врач|аптека|лекарство|больница|спорт")),
    ("bills", _keywords(
        r"bill|electric|electricity|water|internet|phone|rent",
        r"فاتورة|كهرباء|ماء|إنترنت|إيجار|счёт|электричество|вода|интернет|аренда")),
    ("education", _keywords(
        r"book|course|school|university|study",
        r"كتاب|دورة|مدرسة|جامعة|книга|курс|школа|университет")),
    ("groceries", _keywords(
        r"grocery|groceries|supermarket|market",
        r"بقالة|سوبرماركت|سوق|продукты|супермаркет|рынок")),
]


@dataclass(frozen=True)
class ParsedEntry:
    amount: float
    category: str
    type: TransactionType
    vendor: str = ""


def normalize_digits(text: str) -> str:
    return text.translate(_AR_DIGITS)


def parse_amount(text: str) -> Optional[float]:
    """Return the first number in `text` (thousands commas allowed), or None."""
    match = _AMOUNT_RE.search(normalize_digits(text))
    if not match:
        return None
    return float(match.group(0).replace(",", ""))


def detect_category(text: str) -> str:
    for category, pattern in CATEGORY_KEYWORDS:
        if pattern.search(text):
            return category
    return "other"


def parse_quick_entry(text: str) -> Optional[ParsedEntry]:
    """
    Parse a free-text message into a transaction draft.

    Returns:
        ParsedEntry, or None when the message holds no positive amount.
    """
    normalized = normalize_digits(text).strip()
    amount = parse_amount(normalized)
    if amount is None or amount <= 0:
        return None

    tx_type = TransactionType.INCOME if _INCOME_RE.search(normalized) else TransactionType.EXPENSE
    vendor = _AMOUNT_RE.sub("", normalized, count=1).strip()
    if not 0 < len(vendor) < 50:
        vendor = ""

    return ParsedEntry(
        amount=amount,
        category=detect_category(normalized),
        type=tx_type,
        vendor=vendor,
    )
