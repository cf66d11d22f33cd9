from __future__ import annotations

from .registry import register_language

EN_US = {
    # Saturday first
    "day_short": ("Sat", "Sun", "Mon", "Tue", "Wed", "Thu", "Fri"),
    "day_full": ("Saturday", "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday"),
    "month_short": ("Far", "Ord", "Kho", "Tir", "Mor", "Sha", "Meh", "Aba", "Aza", "Dey", "Bah", "Esf"),
    "month_full": (
        "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
        "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
    ),
    "meridiem_short": ("AM", "PM"),
    "meridiem_full": ("Ante Meridiem", "Post Meridiem"),
    "animal": (
        "Rat", "Ox", "Tiger", "Rabbit", "Dragon", "Snake",
        "Horse", "Goat", "Monkey", "Rooster", "Dog", "Pig",
    ),
    "constellation": (
        "Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
        "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces",
    ),
    "season": ("Spring", "Summer", "Autumn", "Winter"),
    "solstice": ("", "Vernal Equinox", "Summer Solstice", "Autumnal Equinox", "Winter Solstice"),
    "suffix": ("th", "st", "nd", "rd"),
}

FA_IR = {
    "day_short": ("ش", "ی", "د", "س", "چ", "پ", "ج"),
    "day_full": ("شنبه", "یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنجشنبه", "جمعه"),
    "month_short": (
        "فرو", "ارد", "خرد", "تیر", "مرد", "شهر",
        "مهر", "آبا", "آذر", "دی", "بهم", "اسف",
    ),
    "month_full": (
        "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
        "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
    ),
    "meridiem_short": ("ق.ظ", "ب.ظ"),
    "meridiem_full": ("قبل از ظهر", "بعد از ظهر"),
    "animal": (
        "موش", "گاو", "پلنگ", "خرگوش", "نهنگ", "مار",
        "اسب", "گوسفند", "میمون", "مرغ", "سگ", "خوک",
    ),
    "constellation": (
        "حمل", "ثور", "جوزا", "سرطان", "اسد", "سنبله",
        "میزان", "عقرب", "قوس", "جدی", "دلو", "حوت",
    ),
    "season": ("بهار", "تابستان", "پاییز", "زمستان"),
    "solstice": ("", "اعتدال بهاری", "انقلاب تابستانی", "اعتدال پاییزی", "انقلاب زمستانی"),
    "suffix": ("ام", "ام", "ام", "ام"),
}

register_language("en_US", EN_US)
register_language("fa_IR", FA_IR)
