"""
Typed settings categories kept in the key/value settings bag.

Each category is one row in KeyValueStore. The models below carry the
defaults a fresh install starts with and validate writes at the API boundary.
Unknown keys inside a category are kept as sent.
"""

from typing import Dict, List, Literal, Type, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SettingsModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def wire(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


# --- Ads ---

class PlacementSetting(SettingsModel):
    enabled: bool = False
    type: Literal["network", "custom"] = "network"
    network_key: str = ""
    custom_code: str = ""


class ABTestStats(SettingsModel):
    impressions_a: int = Field(default=0, alias="impressionsA")
    impressions_b: int = Field(default=0, alias="impressionsB")
    clicks_a: int = Field(default=0, alias="clicksA")
    clicks_b: int = Field(default=0, alias="clicksB")


class ABTest(SettingsModel):
    id: str
    placement: str
    enabled: bool = False
    code_a: str = Field(default="", alias="codeA")
    code_b: str = Field(default="", alias="codeB")
    stats: ABTestStats = Field(default_factory=ABTestStats)


class CustomAds(SettingsModel):
    enabled: bool = False
    rotation: bool = False
    codes: List[str] = Field(default_factory=list)


class DeviceTargeting(SettingsModel):
    enabled: bool = False
    desktop_code: str = "<!-- Desktop Ad -->"
    mobile_code: str = "<!-- Mobile Ad -->"


class GeoTargetedAd(SettingsModel):
    id: str
    country: str
    code: str


class GeoTargeting(SettingsModel):
    enabled: bool = False
    rules: List[GeoTargetedAd] = Field(
        default_factory=lambda: [GeoTargetedAd(id="1", country="IN", code="<!-- Ad for India -->")]
    )


class AdNetwork(SettingsModel):
    code: str = ""
    notes: str = ""


class AdNetworkSettings(SettingsModel):
    google_ad_sense: AdNetwork = Field(
        default_factory=lambda: AdNetwork(code="<!-- Google AdSense Placeholder -->", notes="Main 728x90 Banner"),
        alias="googleAdSense",
    )
    adsterra: AdNetwork = Field(default_factory=lambda: AdNetwork(code="<!-- Adsterra Placeholder -->"))
    media_net: AdNetwork = Field(
        default_factory=lambda: AdNetwork(code="<!-- Media.net Placeholder -->", notes="Sidebar 300x250")
    )
    ezoic: AdNetwork = Field(default_factory=lambda: AdNetwork(code="<!-- Ezoic Placeholder -->"))
    propeller_ads: AdNetwork = Field(default_factory=lambda: AdNetwork(code="<!-- PropellerAds Placeholder -->"))


PlacementKey = Literal[
    "headerAd", "sidebarAd", "footerAd", "inFeedJobsAd",
    "inFeedBlogAd", "jobDetailTopAd", "blogDetailTopAd",
]
PLACEMENT_KEYS = get_args(PlacementKey)


def _placement(enabled: bool, network_key: str = "") -> PlacementSetting:
    return PlacementSetting(enabled=enabled, type="network", network_key=network_key)


class AdSettings(SettingsModel):
    header_ad: PlacementSetting = Field(default_factory=lambda: _placement(True, "googleAdSense"))
    sidebar_ad: PlacementSetting = Field(default_factory=lambda: _placement(True, "mediaNet"))
    footer_ad: PlacementSetting = Field(default_factory=lambda: _placement(False))
    in_feed_jobs_ad: PlacementSetting = Field(default_factory=lambda: _placement(True, "googleAdSense"))
    in_feed_blog_ad: PlacementSetting = Field(default_factory=lambda: _placement(False))
    job_detail_top_ad: PlacementSetting = Field(default_factory=lambda: _placement(False))
    blog_detail_top_ad: PlacementSetting = Field(default_factory=lambda: _placement(False))

    ad_frequency: Literal["low", "medium", "high"] = "medium"
    ad_start_time: str = "00:00"
    ad_end_time: str = "23:59"
    banner_ads: bool = True
    square_ads: bool = True
    skyscraper_ads: bool = False
    popup_ads: bool = False
    custom_ads: CustomAds = Field(default_factory=CustomAds)
    ab_tests: List[ABTest] = Field(
        default_factory=lambda: [
            ABTest(
                id="1",
                placement="Sidebar",
                code_a="<!-- Ad Variation A -->",
                code_b="<!-- Ad Variation B -->",
                stats=ABTestStats(impressions_a=10520, clicks_a=315, impressions_b=10480, clicks_b=350),
            )
        ]
    )
    device_targeting: DeviceTargeting = Field(default_factory=DeviceTargeting)
    geo_targeting: GeoTargeting = Field(default_factory=GeoTargeting)
    ad_networks: AdNetworkSettings = Field(default_factory=AdNetworkSettings)
    active_tests: List[PlacementKey] = Field(default_factory=list)


# --- Site ---

class SEOGlobal(SettingsModel):
    site_title: str = "Jobtica - Your Gateway to Government Jobs"
    meta_description: str = (
        "Find the latest government job notifications, exam results, and admit cards. "
        "Your one-stop destination for all sarkari naukri updates."
    )
    meta_keywords: str = "sarkari naukri, government jobs, jobs, recruitment, exam result, admit card, jobtica"


class SEOSocial(SettingsModel):
    og_title: str = "Jobtica - Government Job Portal"
    og_description: str = "Your one-stop destination for all sarkari naukri updates."
    og_image_url: str = "https://jobtica.vercel.app/og-image.jpg"


class SEOStructuredData(SettingsModel):
    job_posting_schema_enabled: bool = True


class SEOSettings(SettingsModel):
    global_: SEOGlobal = Field(default_factory=SEOGlobal, alias="global")
    social: SEOSocial = Field(default_factory=SEOSocial)
    structured_data: SEOStructuredData = Field(default_factory=SEOStructuredData)


class GeneralSettings(SettingsModel):
    site_title: str = "Jobtica"
    site_icon_url: str = "/favicon.svg"
    maintenance_mode: bool = False
    maintenance_message: str = (
        "Our website is currently undergoing scheduled maintenance. "
        "We should be back shortly. Thank you for your patience."
    )
    email_notifications_enabled: bool = True


class SocialMediaSettings(SettingsModel):
    facebook: str = "https://facebook.com"
    instagram: str = "https://instagram.com"
    telegram: str = "https://t.me"
    telegram_group: str = "https://t.me"
    telegram_group_icon: str = "users"
    whatsapp: str = "https://wa.me"


class SMTPSettings(SettingsModel):
    configured: bool = False
    host: str = ""
    port: int = 587
    secure: bool = True
    user: str = ""
    pass_: str = Field(default="", alias="pass")
    from_email: str = ""
    from_name: str = ""


class RSSSettings(SettingsModel):
    feed_url: str = ""


class WhatsAppAlerts(SettingsModel):
    enabled: bool = False
    api_key: str = ""
    sender_number: str = ""


class SMSAlerts(SettingsModel):
    enabled: bool = False
    twilio_sid: str = ""
    twilio_token: str = ""
    twilio_number: str = ""


class AlertSettings(SettingsModel):
    whats_app: WhatsAppAlerts = Field(default_factory=WhatsAppAlerts, alias="whatsApp")
    sms: SMSAlerts = Field(default_factory=SMSAlerts)


class PopupAdSettings(SettingsModel):
    enabled: bool = False
    image_url: str = "https://via.placeholder.com/600x400.png/9333ea/ffffff?text=Popup+Ad"
    destination_url: str = "#"
    size: Literal["small", "medium", "large"] = "medium"
    open_delay_seconds: int = 3
    close_after_seconds: int = 0  # 0 means manual close only
    show_once_per_session: bool = True


class ThemeSettings(SettingsModel):
    primary_color: str = "#4f46e5"
    accent_color: str = "#9333ea"


class SecuritySettings(SettingsModel):
    enable_csp: bool = Field(default=True, alias="enableCSP")
    auto_logout_minutes: Literal[0, 15, 30, 60] = 30
    enable_2fa_simulation: bool = Field(default=False, alias="enable2FASimulation")
    warn_on_external_link: bool = True
    prevent_content_copy: bool = False
    demo_mode_enabled: bool = True
    demo_session_timeout_minutes: Literal[0, 5, 10, 15] = 10


class DemoUserSettings(SettingsModel):
    can_manage_jobs: bool = True
    can_manage_content: bool = True
    can_manage_links: bool = True
    can_manage_audience: bool = False
    can_send_emails: bool = False
    can_manage_ads: bool = False
    can_change_theme: bool = True


class GoogleSearchConsoleSettings(SettingsModel):
    verification_tag: str = ""


SETTINGS_CATEGORIES: Dict[str, Type[SettingsModel]] = {
    "adSettings": AdSettings,
    "seoSettings": SEOSettings,
    "generalSettings": GeneralSettings,
    "socialMediaSettings": SocialMediaSettings,
    "smtpSettings": SMTPSettings,
    "rssSettings": RSSSettings,
    "alertSettings": AlertSettings,
    "popupAdSettings": PopupAdSettings,
    "themeSettings": ThemeSettings,
    "securitySettings": SecuritySettings,
    "demoUserSettings": DemoUserSettings,
    "googleSearchConsoleSettings": GoogleSearchConsoleSettings,
}


def default_settings() -> Dict[str, dict]:
    """Wire form of every category at its defaults."""
    return {key: model().wire() for key, model in SETTINGS_CATEGORIES.items()}
