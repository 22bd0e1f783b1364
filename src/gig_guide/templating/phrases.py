# ABOUTME: Static per-language phrase tables used by the templating engine.
# ABOUTME: Maps canonical English sentences and labels to localized text, plus proper nouns.

from collections.abc import Mapping
from functools import cached_property
from typing import Protocol

# Canonical English keys. The description paragraphs are built from these sentences.
S1 = (
    "Melbourne's vibrant live music scene offers everything from intimate jazz clubs "
    "to stadium rock concerts."
)
S2 = "With over 460 live music venues, it's one of the world's leading music cities."
S3 = (
    "Melbourne has a thriving live music culture, with venues ranging from historic pubs "
    "to modern performance spaces."
)
S4 = "The city hosts more live music venues per capita than any other city in the world."
S5 = (
    "Known as Australia's music capital, Melbourne's live scene spans genres from indie rock "
    "and electronic to jazz and classical."
)
S6 = "The city's diverse venues create a unique cultural tapestry for music lovers."
S7 = (
    "Melbourne's iconic music scene has launched countless careers and attracts global acts "
    "year-round."
)
S8 = (
    "With venues scattered across unique neighborhoods, each offering its own musical "
    "flavor and atmosphere."
)
TITLE = "MELBOURNE GIG GUIDE"
GIGS = "GIGS NEAR YOU"
HOW_TO_USE = "HOW TO USE"
HOW_1 = "View on mobile to scan QR codes directly from screen"
HOW_2 = "QR codes link to venue locations on Google Maps"
HOW_3 = "Share this guide with friends!"
SENT_TO = "This information was sent to"
TAGLINE = "Melbourne Gig Guide - Supporting local music and venues."
KM_AWAY = "km away"
CHECK_VENUE = "Check venue"
FREE = "Free"
TBA = "TBA"

PHRASES: dict[str, dict[str, str]] = {
    "ja": {
        S1: "メルボルンの活気あるライブ音楽シーンは、アットホームなジャズクラブからスタジアムでのロックコンサートまで、あらゆる音楽体験を提供しています。",
        S2: "460以上のライブ音楽会場があり、世界有数の音楽都市の一つです。",
        S3: "メルボルンには、歴史あるパブから現代的なパフォーマンススペースまで様々な会場があり、活気あるライブ音楽文化が根付いています。",
        S4: "この都市は、人口あたりのライブ音楽会場の数が世界のどの都市よりも多いです。",
        S5: "オーストラリアの音楽の首都として知られるメルボルンのライブシーンは、インディーロックやエレクトロニックからジャズやクラシックまで、幅広いジャンルを網羅しています。",
        S6: "市内の多様な会場は、音楽愛好家のためのユニークな文化のタペストリーを作り出しています。",
        S7: "メルボルンを象徴する音楽シーンは、数え切れないほどのキャリアを生み出し、一年中世界中のアーティストを魅了しています。",
        S8: "個性的な地区に点在する会場は、それぞれ独自の音楽的な味わいと雰囲気を提供しています。",
        TITLE: "メルボルン ライブガイド",
        GIGS: "あなたの近くのライブ",
        HOW_TO_USE: "使い方",
        HOW_1: "モバイルで表示すると、画面から直接QRコードをスキャンできます",
        HOW_2: "QRコードはGoogleマップ上の会場の場所にリンクしています",
        HOW_3: "このガイドを友達と共有しましょう！",
        SENT_TO: "この情報の送信先",
        TAGLINE: "メルボルン ライブガイド - 地元の音楽と会場を応援しています。",
        KM_AWAY: "km 先",
        CHECK_VENUE: "会場に確認",
        FREE: "無料",
        TBA: "未定",
    },
    "zh-CN": {
        S1: "墨尔本充满活力的现场音乐场景应有尽有，从私密的爵士俱乐部到体育场摇滚音乐会。",
        S2: "这里拥有超过460个现场音乐场所，是世界领先的音乐城市之一。",
        S3: "墨尔本拥有蓬勃发展的现场音乐文化，场所从历史悠久的酒吧到现代化的演出空间应有尽有。",
        S4: "这座城市人均拥有的现场音乐场所比世界上任何其他城市都多。",
        S5: "墨尔本被誉为澳大利亚的音乐之都，其现场音乐涵盖从独立摇滚、电子音乐到爵士乐和古典音乐的各种流派。",
        S6: "这座城市多元化的场所为音乐爱好者编织出独特的文化画卷。",
        S7: "墨尔本标志性的音乐场景成就了无数音乐人的事业，并全年吸引着世界各地的演出。",
        S8: "各个场所分布在风格独特的街区，每一处都有自己的音乐风味和氛围。",
        TITLE: "墨尔本演出指南",
        GIGS: "您附近的演出",
        HOW_TO_USE: "使用方法",
        HOW_1: "在手机上查看，可直接从屏幕扫描二维码",
        HOW_2: "二维码链接到Google地图上的场地位置",
        HOW_3: "与朋友分享本指南！",
        SENT_TO: "此信息已发送至",
        TAGLINE: "墨尔本演出指南 - 支持本地音乐和场地。",
        KM_AWAY: "公里外",
        CHECK_VENUE: "请咨询场地",
        FREE: "免费",
        TBA: "待定",
    },
    "zh-TW": {
        S1: "墨爾本充滿活力的現場音樂場景應有盡有，從私密的爵士俱樂部到體育場搖滾音樂會。",
        S2: "這裡擁有超過460個現場音樂場所，是世界領先的音樂城市之一。",
        S3: "墨爾本擁有蓬勃發展的現場音樂文化，場所從歷史悠久的酒吧到現代化的演出空間應有盡有。",
        S4: "這座城市人均擁有的現場音樂場所比世界上任何其他城市都多。",
        S5: "墨爾本被譽為澳洲的音樂之都，其現場音樂涵蓋從獨立搖滾、電子音樂到爵士樂和古典音樂的各種流派。",
        S6: "這座城市多元化的場所為音樂愛好者編織出獨特的文化畫卷。",
        S7: "墨爾本標誌性的音樂場景成就了無數音樂人的事業，並全年吸引著世界各地的演出。",
        S8: "各個場所分佈在風格獨特的街區，每一處都有自己的音樂風味和氛圍。",
        TITLE: "墨爾本表演指南",
        GIGS: "您附近的表演",
        HOW_TO_USE: "使用方法",
        HOW_1: "在手機上查看，可直接從螢幕掃描QR碼",
        HOW_2: "QR碼連結到Google地圖上的場地位置",
        HOW_3: "與朋友分享本指南！",
        SENT_TO: "此資訊已傳送至",
        TAGLINE: "墨爾本表演指南 - 支持本地音樂和場地。",
        KM_AWAY: "公里外",
        CHECK_VENUE: "請洽詢場地",
        FREE: "免費",
        TBA: "待定",
    },
    "ar": {
        S1: "تقدم ساحة الموسيقى الحية النابضة بالحياة في ملبورن كل شيء، من نوادي الجاز الحميمة إلى عروض الروك في الملاعب.",
        S2: "مع أكثر من 460 قاعة للموسيقى الحية، تعد واحدة من المدن الموسيقية الرائدة في العالم.",
        S3: "تتمتع ملبورن بثقافة موسيقية حية مزدهرة، مع أماكن تتراوح من الحانات التاريخية إلى مساحات الأداء الحديثة.",
        S4: "تستضيف المدينة عددًا من أماكن الموسيقى الحية للفرد أكبر من أي مدينة أخرى في العالم.",
        S5: "تُعرف ملبورن بأنها عاصمة الموسيقى في أستراليا، وتمتد ساحتها الحية عبر أنواع من الروك المستقل والموسيقى الإلكترونية إلى الجاز والموسيقى الكلاسيكية.",
        S6: "تخلق أماكن المدينة المتنوعة نسيجًا ثقافيًا فريدًا لعشاق الموسيقى.",
        S7: "أطلقت ساحة الموسيقى الشهيرة في ملبورن مسيرات فنية لا تحصى، وتجذب فنانين عالميين على مدار العام.",
        S8: "مع أماكن منتشرة في أحياء فريدة، يقدم كل منها طابعه الموسيقي وأجواءه الخاصة.",
        TITLE: "دليل حفلات في ملبورن",
        GIGS: "عروض موسيقية بالقرب منك",
        HOW_TO_USE: "كيفية الاستخدام",
        HOW_1: "اعرض الدليل على الهاتف المحمول لمسح رموز الاستجابة السريعة مباشرة من الشاشة",
        HOW_2: "ترتبط رموز الاستجابة السريعة بمواقع قاعات الحفلات على خرائط جوجل",
        HOW_3: "شارك هذا الدليل مع الأصدقاء!",
        SENT_TO: "تم إرسال هذه المعلومات إلى",
        TAGLINE: "دليل حفلات في ملبورن - دعم الموسيقى المحلية وقاعات الحفلات.",
        KM_AWAY: "كم من موقعك",
        CHECK_VENUE: "تحقق من المكان",
        FREE: "مجاني",
        TBA: "سيتم الإعلان لاحقًا",
    },
    "vi": {
        S1: "Sân khấu nhạc sống sôi động của Melbourne mang đến mọi thứ, từ những câu lạc bộ jazz ấm cúng đến các buổi hòa nhạc rock tại sân vận động.",
        S2: "Với hơn 460 địa điểm nhạc sống, đây là một trong những thành phố âm nhạc hàng đầu thế giới.",
        S3: "Melbourne có một nền văn hóa nhạc sống phát triển mạnh mẽ, với các địa điểm từ những quán rượu lâu đời đến các không gian biểu diễn hiện đại.",
        S4: "Thành phố có nhiều địa điểm nhạc sống tính theo đầu người hơn bất kỳ thành phố nào khác trên thế giới.",
        S5: "Được mệnh danh là thủ đô âm nhạc của Úc, sân khấu nhạc sống của Melbourne trải dài từ indie rock và nhạc điện tử đến jazz và nhạc cổ điển.",
        S6: "Các địa điểm đa dạng của thành phố tạo nên một bức tranh văn hóa độc đáo cho những người yêu âm nhạc.",
        S7: "Sân khấu âm nhạc mang tính biểu tượng của Melbourne đã chắp cánh cho vô số sự nghiệp và thu hút các nghệ sĩ quốc tế quanh năm.",
        S8: "Các địa điểm nằm rải rác khắp những khu phố độc đáo, mỗi nơi mang một phong vị âm nhạc và bầu không khí riêng.",
        TITLE: "HƯỚNG DẪN BUỔI DIỄN MELBOURNE",
        GIGS: "BUỔI DIỄN GẦN BẠN",
        HOW_TO_USE: "CÁCH SỬ DỤNG",
        HOW_1: "Xem trên điện thoại để quét mã QR trực tiếp từ màn hình",
        HOW_2: "Mã QR liên kết đến vị trí địa điểm trên Google Maps",
        HOW_3: "Hãy chia sẻ hướng dẫn này với bạn bè!",
        SENT_TO: "Thông tin này đã được gửi đến",
        TAGLINE: "Hướng Dẫn Buổi Diễn Melbourne - Ủng hộ âm nhạc và địa điểm địa phương.",
        KM_AWAY: "km cách bạn",
        CHECK_VENUE: "Liên hệ địa điểm",
        FREE: "Miễn phí",
        TBA: "Sẽ thông báo",
    },
    "es": {
        S1: "La vibrante escena de música en vivo de Melbourne ofrece de todo, desde íntimos clubes de jazz hasta conciertos de rock en estadios.",
        S2: "Con más de 460 locales de música en vivo, es una de las principales ciudades musicales del mundo.",
        S3: "Melbourne tiene una próspera cultura de música en vivo, con locales que van desde pubs históricos hasta modernos espacios escénicos.",
        S4: "La ciudad alberga más locales de música en vivo per cápita que cualquier otra ciudad del mundo.",
        S5: "Conocida como la capital musical de Australia, la escena en vivo de Melbourne abarca géneros que van del rock indie y la electrónica al jazz y la música clásica.",
        S6: "La diversidad de locales de la ciudad crea un tapiz cultural único para los amantes de la música.",
        S7: "La icónica escena musical de Melbourne ha impulsado innumerables carreras y atrae a artistas internacionales durante todo el año.",
        S8: "Con locales repartidos por barrios únicos, cada uno ofrece su propio sabor musical y ambiente.",
        TITLE: "GUÍA DE CONCIERTOS DE MELBOURNE",
        GIGS: "CONCIERTOS CERCA DE TI",
        HOW_TO_USE: "CÓMO USAR",
        HOW_1: "Ábrela en el móvil para escanear los códigos QR directamente desde la pantalla",
        HOW_2: "Los códigos QR enlazan a la ubicación de los locales en Google Maps",
        HOW_3: "¡Comparte esta guía con tus amigos!",
        SENT_TO: "Esta información fue enviada a",
        TAGLINE: "Guía de Conciertos de Melbourne - Apoyando la música y los locales de la zona.",
        KM_AWAY: "km de distancia",
        CHECK_VENUE: "Consultar en el local",
        FREE: "Gratis",
        TBA: "Por confirmar",
    },
    "hi": {
        S1: "मेलबर्न का जीवंत लाइव संगीत परिदृश्य अंतरंग जैज़ क्लबों से लेकर स्टेडियम रॉक कॉन्सर्ट तक सब कुछ प्रदान करता है।",
        S2: "460 से अधिक लाइव संगीत स्थलों के साथ, यह दुनिया के अग्रणी संगीत शहरों में से एक है।",
        S3: "मेलबर्न में एक समृद्ध लाइव संगीत संस्कृति है, जहाँ ऐतिहासिक पब से लेकर आधुनिक प्रदर्शन स्थलों तक कई तरह के स्थल हैं।",
        S4: "यह शहर प्रति व्यक्ति दुनिया के किसी भी अन्य शहर की तुलना में अधिक लाइव संगीत स्थलों की मेज़बानी करता है।",
        S5: "ऑस्ट्रेलिया की संगीत राजधानी के रूप में प्रसिद्ध, मेलबर्न का लाइव संगीत परिदृश्य इंडी रॉक और इलेक्ट्रॉनिक से लेकर जैज़ और शास्त्रीय संगीत तक कई शैलियों में फैला है।",
        S6: "शहर के विविध स्थल संगीत प्रेमियों के लिए एक अनूठा सांस्कृतिक ताना-बाना रचते हैं।",
        S7: "मेलबर्न के प्रतिष्ठित संगीत परिदृश्य ने अनगिनत करियर की शुरुआत की है और यह साल भर दुनिया भर के कलाकारों को आकर्षित करता है।",
        S8: "अनोखे मोहल्लों में फैले इन स्थलों में से हर एक का अपना संगीतमय रंग और माहौल है।",
        TITLE: "मेलबर्न संगीत कार्यक्रम गाइड",
        GIGS: "आपके पास संगीत कार्यक्रम",
        HOW_TO_USE: "उपयोग कैसे करें",
        HOW_1: "स्क्रीन से सीधे QR कोड स्कैन करने के लिए मोबाइल पर देखें",
        HOW_2: "QR कोड Google Maps पर स्थलों के स्थान से जुड़े हैं",
        HOW_3: "इस गाइड को दोस्तों के साथ साझा करें!",
        SENT_TO: "यह जानकारी भेजी गई",
        TAGLINE: "मेलबर्न संगीत कार्यक्रम गाइड - स्थानीय संगीत और स्थलों का समर्थन।",
        KM_AWAY: "किमी दूर",
        CHECK_VENUE: "स्थल से पुष्टि करें",
        FREE: "निःशुल्क",
        TBA: "घोषणा बाकी",
    },
    "ko": {
        S1: "멜버른의 활기찬 라이브 음악 현장은 아늑한 재즈 클럽부터 경기장 록 콘서트까지 모든 것을 제공합니다.",
        S2: "460곳이 넘는 라이브 음악 공연장을 갖춘 세계 최고의 음악 도시 중 하나입니다.",
        S3: "멜버른은 유서 깊은 펍부터 현대적인 공연 공간까지 다양한 공연장을 갖춘 활발한 라이브 음악 문화를 자랑합니다.",
        S4: "이 도시는 인구 대비 라이브 음악 공연장 수가 세계 어느 도시보다 많습니다.",
        S5: "호주의 음악 수도로 알려진 멜버른의 라이브 현장은 인디 록과 일렉트로닉부터 재즈와 클래식까지 다양한 장르를 아우릅니다.",
        S6: "도시의 다양한 공연장은 음악 애호가들을 위한 독특한 문화적 풍경을 만들어 냅니다.",
        S7: "멜버른의 상징적인 음악 현장은 수많은 음악 경력의 출발점이 되었으며 일 년 내내 세계적인 아티스트들을 불러 모읍니다.",
        S8: "개성 있는 동네 곳곳에 자리한 공연장마다 고유한 음악적 색깔과 분위기가 있습니다.",
        TITLE: "멜버른 공연 가이드",
        GIGS: "가까운 공연",
        HOW_TO_USE: "사용 방법",
        HOW_1: "모바일에서 보면 화면의 QR 코드를 바로 스캔할 수 있습니다",
        HOW_2: "QR 코드는 Google 지도의 공연장 위치로 연결됩니다",
        HOW_3: "이 가이드를 친구들과 공유하세요!",
        SENT_TO: "이 정보의 수신자",
        TAGLINE: "멜버른 공연 가이드 - 지역 음악과 공연장을 응원합니다.",
        KM_AWAY: "km 거리",
        CHECK_VENUE: "공연장에 문의",
        FREE: "무료",
        TBA: "미정",
    },
}

PROPER_NOUNS: dict[str, dict[str, str]] = {
    "ja": {"Melbourne": "メルボルン", "Fitzroy": "フィッツロイ", "Richmond": "リッチモンド"},
    "zh-CN": {"Melbourne": "墨尔本", "Fitzroy": "菲茨罗伊", "Richmond": "里士满"},
    "zh-TW": {"Melbourne": "墨爾本", "Fitzroy": "菲茨羅伊", "Richmond": "里士滿"},
    "ar": {
        "Melbourne": "ملبورن",
        "Fitzroy": "فيتزروي",
        "Richmond": "ريتشموند",
        "Australia": "أستراليا",
    },
    "hi": {"Melbourne": "मेलबर्न", "Australia": "ऑस्ट्रेलिया"},
    "ko": {"Melbourne": "멜버른", "Australia": "호주"},
}


class PhraseSource(Protocol):
    """Lookup interface the templating engine translates through."""

    def lookup(self, phrase: str, language: str) -> str | None: ...

    def phrases(self, language: str) -> list[tuple[str, str]]: ...

    def proper_nouns(self, language: str) -> Mapping[str, str]: ...


class StaticPhraseTable:
    """In-memory phrase tables, read-only after construction."""

    def __init__(
        self,
        tables: Mapping[str, Mapping[str, str]] | None = None,
        nouns: Mapping[str, Mapping[str, str]] | None = None,
    ) -> None:
        self._tables = PHRASES if tables is None else tables
        self._nouns = PROPER_NOUNS if nouns is None else nouns

    @cached_property
    def _sorted(self) -> dict[str, list[tuple[str, str]]]:
        return {
            language: sorted(table.items(), key=lambda item: len(item[0]), reverse=True)
            for language, table in self._tables.items()
        }

    def lookup(self, phrase: str, language: str) -> str | None:
        return self._tables.get(language, {}).get(phrase)

    def phrases(self, language: str) -> list[tuple[str, str]]:
        """Known phrases for a language, longest first."""
        return self._sorted.get(language, [])

    def proper_nouns(self, language: str) -> Mapping[str, str]:
        return self._nouns.get(language, {})

    def languages(self) -> list[str]:
        return list(self._tables)
