"""Static option tables used by the listing and hero-slide forms."""

from __future__ import annotations

CARGO_TYPES: tuple[str, ...] = (
    "Gıda",
    "Sanayi Üretimi",
    "İnşaat Malzemeleri",
    "Tekstil",
    "Hafif Tonajlı Yük",
    "Diğer",
)

VEHICLES_NEEDED: tuple[str, ...] = (
    "10 Teker Kamyon",
    "120 M3 Kamyon Römork",
    "13.60 Açık Tır",
    "13.60 Kapalı Tır",
    "Çekici",
    "Açık Kamyon",
    "Açık ve Kapalı Tır",
    "Adr’li Tır",
    "Araç Farketmez",
    "Düz Tenteli",
    "Damper Dorse",
    "Denizyolu",
    "Frigofrig",
    "Havuz Dorse",
    "Isuzu",
    "Kırk Ayak Kamyon",
    "Kısa Dorse",
    "Kamyon",
    "Kamyon Römork",
    "Kamyonet",
    "Kayar Perde Kayar Çatı",
    "Konteyner",
    "Konteyner (20'lik)",
    "Konteyner (40'lık)",
    "Konteyner (45'lik)",
    "Kuru Yük Gemisi",
    "Lowbed",
    "Mega Araç",
    "Midilli",
    "Minivan",
    "Oto Taşıma",
    "Panelvan",
    "Proje Yükü",
    "Römork Tır",
    "Sal Kasa Dorse",
    "Tanker",
    "Tenteli Kamyon",
    "Tenteli Minivan",
    "Tenteli Tır",
    "Tenteli Tır ya da Frigofirik Tır",
    "Yanıcılı Araç",
)

LOADING_TYPES: tuple[str, ...] = ("Komple", "Parsiyel", "Tonajlı")

CARGO_FORMS: tuple[str, ...] = ("Paletli", "Kolili", "Balya", "Bobin", "Diğer")

WEIGHT_UNITS: tuple[str, ...] = ("Ton", "Kg", "M³ (metreküp)")

DOMESTIC_SCOPE = "Yurt İçi"
INTERNATIONAL_SCOPE = "Yurt Dışı"
SHIPMENT_SCOPES: tuple[str, ...] = (DOMESTIC_SCOPE, INTERNATIONAL_SCOPE)

COMMERCIAL = "Ticari"
RESIDENTIAL = "Evden Eve"
EMPTY_VEHICLE = "Boş Araç"
FREIGHT_TYPES: tuple[str, ...] = (COMMERCIAL, RESIDENTIAL, EMPTY_VEHICLE)

RESIDENTIAL_TRANSPORT_TYPES: tuple[str, ...] = (
    "Uluslararası Taşımacılık",
    "Şehirlerarası Taşımacılık",
    "Ofis Taşımacılığı",
    "Fabrika Taşımacılığı",
    "Fuar Taşımacılığı",
    "Diğer",
)

RESIDENTIAL_PLACE_TYPES: tuple[str, ...] = ("Ev", "İş Yeri", "Malzeme")

RESIDENTIAL_ELEVATOR_STATUSES: tuple[str, ...] = (
    "Asansör Yok",
    "Yükleme Adresinde Var",
    "Boşaltma Adresinde Var",
    "Her İkisinde de Var",
)

RESIDENTIAL_FLOOR_LEVELS: tuple[str, ...] = (
    "Giriş Kat",
    "1’nci Kat",
    "2’nci Kat",
    "3’ncü Kat",
    "4’ncü Kat",
    "5’nci Kat ve Üzeri",
)

EMPTY_VEHICLE_SERVICE_TYPES: tuple[str, ...] = ("Komple", "Parsiyel", "Komple veya Parsiyel")

HERO_SLIDE_TYPES: tuple[str, ...] = (
    "centered",
    "left-aligned",
    "with-input",
    "split",
    "title-only",
    "video-background",
)

HERO_SLIDE_LABELS: dict[str, str] = {
    "centered": "Ortalı Tanıtım",
    "left-aligned": "Sola Hizalı Tanıtım",
    "with-input": "Form İçeren Tanıtım",
    "split": "İki Kolonlu Tanıtım",
    "title-only": "Sade Başlık",
    "video-background": "Video Arka Planlı",
}

BUTTON_SHAPES: tuple[str, ...] = ("default", "rounded")

MEDIA_TYPES: tuple[str, ...] = ("image", "video")
