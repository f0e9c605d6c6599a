"""Per-page, per-language SEO metadata used by the prerender step."""

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

SHARED_KEYWORDS_EN = ", ".join(
    [
        "ISAM",
        "industrial intelligence",
        "industrial automation",
        "digital twin",
        "IIoT",
        "SCADA",
        "EMS",
        "predictive maintenance",
        "industrial AI",
    ]
)

SHARED_KEYWORDS_FA = "، ".join(
    [
        "ایسام",
        "هوشمندسازی صنعتی",
        "اتوماسیون صنعتی",
        "دوقلوی دیجیتال",
        "IIoT",
        "SCADA",
        "EMS",
        "نگهداری پیش‌بینانه",
        "هوش مصنوعی صنعتی",
    ]
)


class PageMeta(BaseModel):
    """Head metadata for one page in one language."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    keywords: str


PAGE_META = MappingProxyType(
    {
        "home": {
            "en": PageMeta(
                title="ISAM | Industrial Intelligence and Automation Solutions",
                description=(
                    "ISAM provides digital twin, IIoT, EMS, SCADA, predictive "
                    "maintenance, and industrial AI solutions for modern "
                    "industrial operations."
                ),
                keywords=SHARED_KEYWORDS_EN,
            ),
            "fa": PageMeta(
                title="ایسام | هوشمندسازی صنعتی و تحلیل داده",
                description=(
                    "ایسام ارائه‌دهنده راهکارهای دوقلوی دیجیتال، IIoT، EMS، SCADA، "
                    "نگهداری پیش‌بینانه و هوش مصنوعی صنعتی برای صنایع پیشرو است."
                ),
                keywords=SHARED_KEYWORDS_FA,
            ),
        },
        "about": {
            "en": PageMeta(
                title="About ISAM | Industrial Intelligence. Practical Impact.",
                description=(
                    "Learn about ISAM mission, values, and delivery approach for "
                    "industrial intelligence, analytics, and digital transformation."
                ),
                keywords=f"{SHARED_KEYWORDS_EN}, about ISAM, industrial transformation",
            ),
            "fa": PageMeta(
                title="درباره ایسام | تحلیل هوشمند برای مدیریت صنایع",
                description=(
                    "با ماموریت، ارزش‌ها و رویکرد اجرایی ایسام در مسیر هوشمندسازی "
                    "و تحول دیجیتال صنعتی آشنا شوید."
                ),
                keywords=f"{SHARED_KEYWORDS_FA}، درباره ایسام، تحول دیجیتال صنعتی",
            ),
        },
        "services": {
            "en": PageMeta(
                title="ISAM Services | Integrated Industrial Digitalization Capabilities",
                description=(
                    "Explore ISAM services including digital twin, IIoT, predictive "
                    "maintenance, SCADA, EMS, AI analytics, and executive decision "
                    "support."
                ),
                keywords=f"{SHARED_KEYWORDS_EN}, industrial services, decision support",
            ),
            "fa": PageMeta(
                title="خدمات ایسام | راهکارهای یکپارچه هوشمندسازی صنعتی",
                description=(
                    "جزئیات خدمات ایسام شامل دوقلوی دیجیتال، IIoT، نگهداری پیش‌بینانه، "
                    "SCADA، EMS، تحلیل هوشمند و تصمیم‌یار مدیریتی."
                ),
                keywords=f"{SHARED_KEYWORDS_FA}، خدمات صنعتی، تصمیم‌یار مدیریتی",
            ),
        },
        "contact": {
            "en": PageMeta(
                title="Contact ISAM | Industrial Requirements Consultation",
                description=(
                    "Contact ISAM to discuss your industrial requirements and "
                    "receive consultation on digital transformation and "
                    "intelligence projects."
                ),
                keywords=f"{SHARED_KEYWORDS_EN}, contact ISAM, industrial consulting",
            ),
            "fa": PageMeta(
                title="تماس با ایسام | مشاوره نیازهای صنعتی",
                description=(
                    "برای بررسی نیازهای صنعتی سازمان خود و دریافت مشاوره "
                    "هوشمندسازی با تیم ایسام در ارتباط باشید."
                ),
                keywords=f"{SHARED_KEYWORDS_FA}، تماس با ایسام، مشاوره صنعتی",
            ),
        },
        "privacy_policy": {
            "en": PageMeta(
                title="Privacy Policy | ISAM",
                description=(
                    "Read how ISAM collects, uses, stores, and protects user "
                    "information on this website."
                ),
                keywords="ISAM privacy policy, personal data, user privacy",
            ),
            "fa": PageMeta(
                title="سیاست حفظ حریم خصوصی | ایسام",
                description=(
                    "نحوه جمع‌آوری، استفاده، نگهداری و حفاظت از اطلاعات کاربران "
                    "در وب‌سایت ایسام را مطالعه کنید."
                ),
                keywords="سیاست حفظ حریم خصوصی ایسام، داده شخصی، حریم خصوصی کاربران",
            ),
        },
        "data_privacy": {
            "en": PageMeta(
                title="Data Privacy | ISAM",
                description=(
                    "Understand ISAM data processing, storage, security controls, "
                    "and data subject rights."
                ),
                keywords="ISAM data privacy, data protection, data governance",
            ),
            "fa": PageMeta(
                title="حریم خصوصی داده‌ها | ایسام",
                description=(
                    "چارچوب پردازش، نگهداری، امنیت داده‌ها و حقوق مرتبط با داده‌ها "
                    "در خدمات ایسام را مشاهده کنید."
                ),
                keywords="حریم خصوصی داده ایسام، حفاظت داده، حاکمیت داده",
            ),
        },
        "not_found": {
            "en": PageMeta(
                title="Page Not Found | ISAM",
                description="The requested page could not be found on ISAM website.",
                keywords="ISAM 404, page not found",
            ),
            "fa": PageMeta(
                title="صفحه یافت نشد | ایسام",
                description="صفحه درخواستی در وب‌سایت ایسام یافت نشد.",
                keywords="ایسام 404، صفحه یافت نشد",
            ),
        },
    }
)


def get_page_meta(page_key: str = "home", language: str = "en") -> PageMeta:
    """Metadata for a page, falling back to the home page and to English."""
    safe_language = "fa" if language == "fa" else "en"
    by_page = PAGE_META.get(page_key) or PAGE_META["home"]
    return by_page.get(safe_language) or PAGE_META["home"][safe_language]
