"""
utils/i18n.py
-------------
Reply texts in English, Arabic and Russian.
Missing translations fall back to English.
"""

TEXTS: dict[str, dict[str, str]] = {
    # ── General ───────────────────────────────────────────
    "welcome": {
        "en": "Hi {name}! 👋\nI'm Masareefy, your personal budget assistant.\n"
              "Start with /setup, then check /plans.\nType /help to see every command.",
        "ar": "مرحباً {name}! 👋\nأنا مصاريفي، مساعدك الشخصي للميزانية.\n"
              "ابدأ بـ /setup وبعدين شوف /plans.\nاكتب /help لعرض كل الأوامر.",
        "ru": "Привет, {name}! 👋\nЯ Masareefy, ваш помощник по бюджету.\n"
              "Начните с /setup, затем откройте /plans.\n/help покажет все команды.",
    },
    "unauthorized": {
        "en": "⛔ Sorry, this bot is private.",
        "ar": "⛔ عذراً، هذا البوت خاص ومش متاح للاستخدام العام.",
        "ru": "⛔ Извините, это частный бот.",
    },
    "rate_limited": {
        "en": "⚠️ Too many messages. Please wait a moment and try again.",
        "ar": "⚠️ أنت بتبعت رسائل كتير. استنى شوية وحاول تاني.",
        "ru": "⚠️ Слишком много сообщений. Подождите немного.",
    },
    "usage": {
        "en": "⚠️ Usage: {usage}",
        "ar": "⚠️ الاستخدام: {usage}",
        "ru": "⚠️ Использование: {usage}",
    },
    "not_understood": {
        "en": "🤔 I couldn't find an amount. Try something like \"coffee 15\".",
        "ar": "🤔 مش لاقي مبلغ. جرب مثلاً \"قهوة ١٥\".",
        "ru": "🤔 Не нашёл сумму. Попробуйте, например, \"кофе 15\".",
    },
    # ── Errors ────────────────────────────────────────────
    "error_generic": {
        "en": "⚠️ Something went wrong. Please try again.",
        "ar": "⚠️ حصل مشكلة. حاول تاني.",
        "ru": "⚠️ Что-то пошло не так. Попробуйте ещё раз.",
    },
    "error_bad_date": {
        "en": "⚠️ Dates must look like 2024-01-31.",
        "ar": "⚠️ التاريخ لازم يكون بالشكل 2024-01-31.",
        "ru": "⚠️ Дата должна быть в формате 2024-01-31.",
    },
    "error_no_profile": {
        "en": "📭 No profile yet. Start with /setup <balance> <next salary date>.",
        "ar": "📭 مفيش بيانات لسه. ابدأ بـ /setup <الرصيد> <تاريخ الراتب الجاي>.",
        "ru": "📭 Профиля ещё нет. Начните с /setup <баланс> <дата зарплаты>.",
    },
    "error_no_bill": {
        "en": "⚠️ No bill with that id.",
        "ar": "⚠️ مفيش فاتورة بالرقم ده.",
        "ru": "⚠️ Счёт с таким номером не найден.",
    },
    "error_no_transaction": {
        "en": "⚠️ No transaction with that id.",
        "ar": "⚠️ مفيش عملية بالرقم ده.",
        "ru": "⚠️ Операция с таким номером не найдена.",
    },
    "error_plan_unavailable": {
        "en": "🚨 Your balance doesn't cover your bills, so only the austerity plan is available.",
        "ar": "🚨 رصيدك مش مغطي فواتيرك، فخطة التقشف بس هي المتاحة.",
        "ru": "🚨 Баланс не покрывает счета, доступен только план аскетизма.",
    },
    # ── Profile ───────────────────────────────────────────
    "setup_done": {
        "en": "✅ Saved.\n💳 Balance: {balance} {currency}\n📅 Next salary: {next_salary} (every {interval} days)",
        "ar": "✅ تم الحفظ.\n💳 الرصيد: {balance} {currency}\n📅 الراتب الجاي: {next_salary} (كل {interval} يوم)",
        "ru": "✅ Сохранено.\n💳 Баланс: {balance} {currency}\n📅 Следующая зарплата: {next_salary} (каждые {interval} дн.)",
    },
    "savings_set": {
        "en": "🐷 Savings balance set to {amount} {currency}.",
        "ar": "🐷 تم تحديد رصيد الادخار: {amount} {currency}.",
        "ru": "🐷 Сбережения: {amount} {currency}.",
    },
    "language_set": {
        "en": "🌐 Language set to English.",
        "ar": "🌐 تم تغيير اللغة للعربية.",
        "ru": "🌐 Язык изменён на русский.",
    },
    "currency_set": {
        "en": "💱 Currency set to {currency}.",
        "ar": "💱 تم تغيير العملة إلى {currency}.",
        "ru": "💱 Валюта: {currency}.",
    },
    # ── Plans ─────────────────────────────────────────────
    "plans_header": {
        "en": "📋 *Suggested budget plans*\n📅 {days} days until salary ({weekdays} weekdays, {weekends} weekend days)\n"
              "💳 Disposable: {disposable} {currency} (unpaid bills: {bills})",
        "ar": "📋 *خطط الميزانية المقترحة*\n📅 {days} يوم لحد الراتب ({weekdays} أيام عمل، {weekends} أيام إجازة)\n"
              "💳 المتاح: {disposable} {currency} (فواتير غير مدفوعة: {bills})",
        "ru": "📋 *Рекомендуемые планы*\n📅 {days} дн. до зарплаты ({weekdays} будних, {weekends} выходных)\n"
              "💳 Свободно: {disposable} {currency} (неоплаченные счета: {bills})",
    },
    "plans_critical": {
        "en": "🚨 Your balance doesn't cover this month's unpaid bills.",
        "ar": "🚨 رصيدك مش مغطي الفواتير غير المدفوعة للشهر ده.",
        "ru": "🚨 Баланс не покрывает неоплаченные счета этого месяца.",
    },
    "plan_line": {
        "en": "{marker} *{title}*: {limit} {currency}/day\n   {description}",
        "ar": "{marker} *{title}*: {limit} {currency}/يوم\n   {description}",
        "ru": "{marker} *{title}*: {limit} {currency}/день\n   {description}",
    },
    "plan_savings": {
        "en": "   Save: +{amount}",
        "ar": "   توفير متوقع: +{amount}",
        "ru": "   Накопления: +{amount}",
    },
    "plans_footer": {
        "en": "Choose with /plan austerity | balanced | comfort",
        "ar": "اختار بـ /plan austerity | balanced | comfort",
        "ru": "Выберите: /plan austerity | balanced | comfort",
    },
    "plan_selected": {
        "en": "✅ Active plan: *{title}*, {limit} {currency}/day.",
        "ar": "✅ الخطة الحالية: *{title}*، {limit} {currency}/يوم.",
        "ru": "✅ Активный план: *{title}*, {limit} {currency}/день.",
    },
    # ── Dashboard ─────────────────────────────────────────
    "dashboard": {
        "en": "💳 *Balance:* {balance} {currency}\n🐷 *Savings:* {savings} {currency}\n"
              "📈 Income this month: +{income}\n📉 Spent this month: -{expense}\n"
              "📅 {days} days until salary ({next_salary})",
        "ar": "💳 *الرصيد:* {balance} {currency}\n🐷 *المدخرات:* {savings} {currency}\n"
              "📈 دخل الشهر: +{income}\n📉 مصروف الشهر: -{expense}\n"
              "📅 {days} يوم لحد الراتب ({next_salary})",
        "ru": "💳 *Баланс:* {balance} {currency}\n🐷 *Сбережения:* {savings} {currency}\n"
              "📈 Доход за месяц: +{income}\n📉 Расходы за месяц: -{expense}\n"
              "📅 {days} дн. до зарплаты ({next_salary})",
    },
    "dashboard_daily": {
        "en": "{icon} Today: {spent} / {limit} ({percent}%)",
        "ar": "{icon} مصروف اليوم: {spent} / {limit} ({percent}%)",
        "ru": "{icon} Сегодня: {spent} / {limit} ({percent}%)",
    },
    "dashboard_burn": {
        "en": "🔥 Burn rate: {burn}/day, money lasts ~{days} days",
        "ar": "🔥 معدل الصرف: {burn}/يوم، الفلوس تكفي ~{days} يوم",
        "ru": "🔥 Траты: {burn}/день, денег хватит на ~{days} дн.",
    },
    "low_funds": {
        "en": "⚠️ *Low funds!* At {burn}/day your balance runs out in ~{days} days, before your salary arrives.",
        "ar": "⚠️ *الرصيد قرب يخلص!* بمعدل {burn}/يوم فلوسك هتخلص خلال ~{days} يوم، قبل الراتب.",
        "ru": "⚠️ *Мало средств!* При {burn}/день деньги закончатся через ~{days} дн., до зарплаты.",
    },
    # ── Bills ─────────────────────────────────────────────
    "bills_empty": {
        "en": "📭 No fixed bills yet. Add one with /add_bill <amount> <name>.",
        "ar": "📭 مفيش فواتير ثابتة. ضيف واحدة بـ /add_bill <المبلغ> <الاسم>.",
        "ru": "📭 Счетов пока нет. Добавьте: /add_bill <сумма> <название>.",
    },
    "bills_header": {
        "en": "🧾 Fixed bills",
        "ar": "🧾 الفواتير الثابتة",
        "ru": "🧾 Постоянные счета",
    },
    "bill_paid_line": {
        "en": "✅ #{id} {name}: {amount}, paid {date}",
        "ar": "✅ #{id} {name}: {amount}، اتدفعت {date}",
        "ru": "✅ #{id} {name}: {amount}, оплачен {date}",
    },
    "bill_due_line": {
        "en": "⏳ #{id} {name}: {amount}, due this month",
        "ar": "⏳ #{id} {name}: {amount}، مستحقة الشهر ده",
        "ru": "⏳ #{id} {name}: {amount}, к оплате в этом месяце",
    },
    "bills_unpaid_total": {
        "en": "💶 Unpaid this month: {amount}",
        "ar": "💶 غير مدفوع الشهر ده: {amount}",
        "ru": "💶 Не оплачено в этом месяце: {amount}",
    },
    "bill_added": {
        "en": "🧾 Bill added: #{id} {name}, {amount}/month",
        "ar": "🧾 تمت إضافة فاتورة: #{id} {name}، {amount}/شهر",
        "ru": "🧾 Счёт добавлен: #{id} {name}, {amount}/мес.",
    },
    "bill_paid": {
        "en": "✅ {name} marked as paid on {date}.",
        "ar": "✅ تم تسجيل دفع {name} بتاريخ {date}.",
        "ru": "✅ {name} оплачен {date}.",
    },
    "bill_deleted": {
        "en": "🗑️ Bill #{id} deleted.",
        "ar": "🗑️ تم حذف الفاتورة #{id}.",
        "ru": "🗑️ Счёт #{id} удалён.",
    },
    # ── Transactions ──────────────────────────────────────
    "tx_recorded": {
        "en": "{emoji} Recorded {type}: {amount} {currency}\n📂 {category}\n🔖 #{id}\n💳 Balance: {balance} {currency}",
        "ar": "{emoji} تم تسجيل {type}: {amount} {currency}\n📂 {category}\n🔖 #{id}\n💳 الرصيد: {balance} {currency}",
        "ru": "{emoji} Записано ({type}): {amount} {currency}\n📂 {category}\n🔖 #{id}\n💳 Баланс: {balance} {currency}",
    },
    "tx_covered": {
        "en": "🔁 {amount} moved from savings to cover the shortfall.",
        "ar": "🔁 تم تحويل {amount} من المدخرات لتغطية العجز.",
        "ru": "🔁 {amount} переведено из сбережений для покрытия.",
    },
    "daily_over": {
        "en": "⚠️ Daily limit exceeded: {spent} of {limit} today.\n"
              "If you keep spending {spent} a day, your balance runs out in ~{days} days. 💀",
        "ar": "⚠️ تجاوزت حدك اليومي: {spent} من {limit} النهارده.\n"
              "لو فضلت تصرف {spent} في اليوم، رصيدك هيخلص خلال ~{days} يوم. 💀",
        "ru": "⚠️ Дневной лимит превышен: {spent} из {limit} сегодня.\n"
              "Если тратить {spent} в день, деньги закончатся через ~{days} дн. 💀",
    },
    "daily_left": {
        "en": "✅ You're within budget: {left} {currency} of today's limit left.",
        "ar": "✅ أنت في الأمان: فاضل {left} {currency} من ميزانية النهارده.",
        "ru": "✅ В рамках бюджета: на сегодня осталось {left} {currency}.",
    },
    "tx_deleted": {
        "en": "🗑️ Transaction #{id} deleted.",
        "ar": "🗑️ تم حذف العملية #{id}.",
        "ru": "🗑️ Операция #{id} удалена.",
    },
    "today_empty": {
        "en": "📭 Nothing recorded today.",
        "ar": "📭 مفيش عمليات النهاردة.",
        "ru": "📭 Сегодня операций нет.",
    },
    "today_header": {
        "en": "📅 Today: spent {expense}, received {income}",
        "ar": "📅 النهاردة: صرفت {expense}، ودخل {income}",
        "ru": "📅 Сегодня: потрачено {expense}, получено {income}",
    },
    "export_empty": {
        "en": "📭 No transactions this month.",
        "ar": "📭 مفيش عمليات الشهر ده.",
        "ru": "📭 В этом месяце операций нет.",
    },
    # ── Reports ───────────────────────────────────────────
    "report_empty": {
        "en": "📭 No expenses this month or in the last 7 days.",
        "ar": "📭 مفيش مصاريف الشهر ده ولا في آخر ٧ أيام.",
        "ru": "📭 Нет расходов ни в этом месяце, ни за последние 7 дней.",
    },
    "report_month": {
        "en": "📊 Expenses {month}: {total} {currency}",
        "ar": "📊 مصاريف {month}: {total} {currency}",
        "ru": "📊 Расходы за {month}: {total} {currency}",
    },
    "report_category_line": {
        "en": "  • {category}: {amount} ({percent}%)",
        "ar": "  • {category}: {amount} ({percent}%)",
        "ru": "  • {category}: {amount} ({percent}%)",
    },
    "report_week": {
        "en": "📅 Last 7 days ({start} → {end}):",
        "ar": "📅 آخر ٧ أيام ({start} ← {end}):",
        "ru": "📅 Последние 7 дней ({start} → {end}):",
    },
    "report_day_line": {
        "en": "  {day}: {amount}",
        "ar": "  {day}: {amount}",
        "ru": "  {day}: {amount}",
    },
    "report_average": {
        "en": "📈 Average per spending day: {amount} {currency}",
        "ar": "📈 متوسط الصرف اليومي: {amount} {currency}",
        "ru": "📈 В среднем за день с расходами: {amount} {currency}",
    },
}


def t(language: str, key: str, **kwargs) -> str:
    """Look up `key` in `language` (English fallback) and format it."""
    variants = TEXTS[key]
    template = variants.get(language) or variants["en"]
    return template.format(**kwargs) if kwargs else template


def money(amount: float) -> str:
    """Whole amounts without decimals, everything else with two."""
    if float(amount).is_integer():
        return f"{amount:,.0f}"
    return f"{amount:,.2f}"
