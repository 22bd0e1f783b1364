# ABOUTME: Per-language configuration records for localized bulletins.
# ABOUTME: Header and footer templates, section headers, QR label, direction, and post-pass rules.

import re

from pydantic import BaseModel, ConfigDict, Field

from gig_guide.languages import display_name


class LanguageProfile(BaseModel):
    """Structural differences of one bulletin language.

    section_headers may hold "gigs" and "how_to_use" lines; a missing key
    falls back to phrase substitution of the English header.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    header_template: str
    footer_template: str
    section_headers: dict[str, str] = Field(default_factory=dict)
    qr_label: str = "QR"
    rtl: bool = False
    post_process_rules: list[tuple[str, str]] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        return display_name(self.code)

    def post_process(self, text: str) -> str:
        """Apply the ordered find/replace corrections over the whole text."""
        for pattern, replacement in self.post_process_rules:
            text = re.sub(pattern, lambda _match, value=replacement: value, text)
        return text


# Phrase substitution can pick the Arabic words for "place" and "party";
# rewrite them toward concert hall and music show.
ARABIC_POST_PROCESS = [
    (r"دليل حفلات", "دليل العروض الموسيقية"),
    (r"\bالمكان\b", "قاعة الحفلات"),
    (r"\bمكان\b", "قاعة حفلات"),
    (r"\bحفلة\b", "عرض موسيقي"),
    (r"\bحفلات\b", "عروض موسيقية"),
]

PROFILES: dict[str, LanguageProfile] = {
    profile.code: profile
    for profile in (
        LanguageProfile(
            code="ja",
            header_template="=== メルボルン ライブガイド - {date} ===",
            section_headers={
                "gigs": "--- あなたの近くのライブ ---",
                "how_to_use": "=== 使い方 ===",
            },
            footer_template="この情報は{name}（{email}）宛てに送信されました。",
            qr_label="QRコード",
        ),
        LanguageProfile(
            code="zh-CN",
            header_template="=== 墨尔本演出指南 - {date} ===",
            section_headers={
                "gigs": "--- 您附近的演出 ---",
                "how_to_use": "=== 使用方法 ===",
            },
            footer_template="此信息已发送至{name}（{email}）。",
            qr_label="二维码",
        ),
        LanguageProfile(
            code="zh-TW",
            header_template="=== 墨爾本表演指南 - {date} ===",
            section_headers={
                "gigs": "--- 您附近的表演 ---",
                "how_to_use": "=== 使用方法 ===",
            },
            footer_template="此資訊已傳送至{name}（{email}）。",
            qr_label="QR碼",
        ),
        LanguageProfile(
            code="ar",
            header_template="=== دليل العروض الموسيقية في ملبورن - {date} ===",
            section_headers={
                "gigs": "--- عروض موسيقية بالقرب منك ---",
                "how_to_use": "=== كيفية الاستخدام ===",
            },
            footer_template="تم إرسال هذه المعلومات إلى {name} على {email}.",
            qr_label="رمز الاستجابة السريعة",
            rtl=True,
            post_process_rules=ARABIC_POST_PROCESS,
        ),
        LanguageProfile(
            code="vi",
            header_template="=== HƯỚNG DẪN BUỔI DIỄN MELBOURNE - {date} ===",
            footer_template="Thông tin này đã được gửi đến {name} tại {email}.",
        ),
        LanguageProfile(
            code="es",
            header_template="=== GUÍA DE CONCIERTOS DE MELBOURNE - {date} ===",
            footer_template="Esta información fue enviada a {name} en {email}.",
        ),
        LanguageProfile(
            code="hi",
            header_template="=== मेलबर्न संगीत कार्यक्रम गाइड - {date} ===",
            footer_template="यह जानकारी {name} को {email} पर भेजी गई थी।",
        ),
        LanguageProfile(
            code="ko",
            header_template="=== 멜버른 공연 가이드 - {date} ===",
            footer_template="이 정보는 {name}님({email})께 전송되었습니다.",
        ),
    )
}


def get_profile(code: str) -> LanguageProfile | None:
    return PROFILES.get(code)
