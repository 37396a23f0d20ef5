"""Static location tables for the supported markets.

Turkey is modelled the way local portals present it: provinces double as the
state level (keyed by plate code) and as the city level, and districts hang off
the province name. Other countries expose ISO subdivision codes as states and a
short list of major cities per state.
"""
from __future__ import annotations

COUNTRIES: dict[str, str] = {
    "TR": "Turkey",
    "DE": "Germany",
    "AE": "United Arab Emirates",
    "US": "United States",
    "CH": "Switzerland",
    "GB": "United Kingdom",
    "NO": "Norway",
}

TURKISH_PROVINCES: dict[str, str] = {
    "01": "Adana",
    "02": "Adıyaman",
    "03": "Afyonkarahisar",
    "04": "Ağrı",
    "05": "Amasya",
    "06": "Ankara",
    "07": "Antalya",
    "08": "Artvin",
    "09": "Aydın",
    "10": "Balıkesir",
    "11": "Bilecik",
    "12": "Bingöl",
    "13": "Bitlis",
    "14": "Bolu",
    "15": "Burdur",
    "16": "Bursa",
    "17": "Çanakkale",
    "18": "Çankırı",
    "19": "Çorum",
    "20": "Denizli",
    "21": "Diyarbakır",
    "22": "Edirne",
    "23": "Elazığ",
    "24": "Erzincan",
    "25": "Erzurum",
    "26": "Eskişehir",
    "27": "Gaziantep",
    "28": "Giresun",
    "29": "Gümüşhane",
    "30": "Hakkari",
    "31": "Hatay",
    "32": "Isparta",
    "33": "Mersin",
    "34": "İstanbul",
    "35": "İzmir",
    "36": "Kars",
    "37": "Kastamonu",
    "38": "Kayseri",
    "39": "Kırklareli",
    "40": "Kırşehir",
    "41": "Kocaeli",
    "42": "Konya",
    "43": "Kütahya",
    "44": "Malatya",
    "45": "Manisa",
    "46": "Kahramanmaraş",
    "47": "Mardin",
    "48": "Muğla",
    "49": "Muş",
    "50": "Nevşehir",
    "51": "Niğde",
    "52": "Ordu",
    "53": "Rize",
    "54": "Sakarya",
    "55": "Samsun",
    "56": "Siirt",
    "57": "Sinop",
    "58": "Sivas",
    "59": "Tekirdağ",
    "60": "Tokat",
    "61": "Trabzon",
    "62": "Tunceli",
    "63": "Şanlıurfa",
    "64": "Uşak",
    "65": "Van",
    "66": "Yozgat",
    "67": "Zonguldak",
    "68": "Aksaray",
    "69": "Bayburt",
    "70": "Karaman",
    "71": "Kırıkkale",
    "72": "Batman",
    "73": "Şırnak",
    "74": "Bartın",
    "75": "Ardahan",
    "76": "Iğdır",
    "77": "Yalova",
    "78": "Karabük",
    "79": "Kilis",
    "80": "Osmaniye",
    "81": "Düzce",
}

STATES: dict[str, dict[str, str]] = {
    "TR": TURKISH_PROVINCES,
    "DE": {
        "BW": "Baden-Württemberg",
        "BY": "Bavaria",
        "BE": "Berlin",
        "BB": "Brandenburg",
        "HB": "Bremen",
        "HH": "Hamburg",
        "HE": "Hesse",
        "MV": "Mecklenburg-Vorpommern",
        "NI": "Lower Saxony",
        "NW": "North Rhine-Westphalia",
        "RP": "Rhineland-Palatinate",
        "SL": "Saarland",
        "SN": "Saxony",
        "ST": "Saxony-Anhalt",
        "SH": "Schleswig-Holstein",
        "TH": "Thuringia",
    },
    "AE": {
        "AZ": "Abu Dhabi",
        "AJ": "Ajman",
        "DU": "Dubai",
        "FU": "Fujairah",
        "RK": "Ras al-Khaimah",
        "SH": "Sharjah",
        "UQ": "Umm al-Quwain",
    },
    "US": {
        "AL": "Alabama",
        "AK": "Alaska",
        "AZ": "Arizona",
        "AR": "Arkansas",
        "CA": "California",
        "CO": "Colorado",
        "CT": "Connecticut",
        "DE": "Delaware",
        "DC": "District of Columbia",
        "FL": "Florida",
        "GA": "Georgia",
        "HI": "Hawaii",
        "ID": "Idaho",
        "IL": "Illinois",
        "IN": "Indiana",
        "IA": "Iowa",
        "KS": "Kansas",
        "KY": "Kentucky",
        "LA": "Louisiana",
        "ME": "Maine",
        "MD": "Maryland",
        "MA": "Massachusetts",
        "MI": "Michigan",
        "MN": "Minnesota",
        "MS": "Mississippi",
        "MO": "Missouri",
        "MT": "Montana",
        "NE": "Nebraska",
        "NV": "Nevada",
        "NH": "New Hampshire",
        "NJ": "New Jersey",
        "NM": "New Mexico",
        "NY": "New York",
        "NC": "North Carolina",
        "ND": "North Dakota",
        "OH": "Ohio",
        "OK": "Oklahoma",
        "OR": "Oregon",
        "PA": "Pennsylvania",
        "RI": "Rhode Island",
        "SC": "South Carolina",
        "SD": "South Dakota",
        "TN": "Tennessee",
        "TX": "Texas",
        "UT": "Utah",
        "VT": "Vermont",
        "VA": "Virginia",
        "WA": "Washington",
        "WV": "West Virginia",
        "WI": "Wisconsin",
        "WY": "Wyoming",
    },
    "CH": {
        "AG": "Aargau",
        "AR": "Appenzell Ausserrhoden",
        "AI": "Appenzell Innerrhoden",
        "BL": "Basel-Landschaft",
        "BS": "Basel-Stadt",
        "BE": "Bern",
        "FR": "Fribourg",
        "GE": "Geneva",
        "GL": "Glarus",
        "GR": "Graubünden",
        "JU": "Jura",
        "LU": "Lucerne",
        "NE": "Neuchâtel",
        "NW": "Nidwalden",
        "OW": "Obwalden",
        "SH": "Schaffhausen",
        "SZ": "Schwyz",
        "SO": "Solothurn",
        "SG": "St. Gallen",
        "TG": "Thurgau",
        "TI": "Ticino",
        "UR": "Uri",
        "VS": "Valais",
        "VD": "Vaud",
        "ZG": "Zug",
        "ZH": "Zürich",
    },
    "GB": {
        "ENG": "England",
        "NIR": "Northern Ireland",
        "SCT": "Scotland",
        "WLS": "Wales",
    },
    "NO": {
        "03": "Oslo",
        "11": "Rogaland",
        "15": "Møre og Romsdal",
        "18": "Nordland",
        "31": "Østfold",
        "32": "Akershus",
        "33": "Buskerud",
        "34": "Innlandet",
        "39": "Vestfold",
        "40": "Telemark",
        "42": "Agder",
        "46": "Vestland",
        "50": "Trøndelag",
        "55": "Troms",
        "56": "Finnmark",
    },
}

# Major cities per (country, state) for the non-Turkish markets.
CITIES_BY_STATE: dict[tuple[str, str], tuple[str, ...]] = {
    ("DE", "BW"): ("Stuttgart", "Mannheim", "Karlsruhe", "Freiburg im Breisgau", "Heidelberg"),
    ("DE", "BY"): ("Munich", "Nuremberg", "Augsburg", "Regensburg"),
    ("DE", "BE"): ("Berlin",),
    ("DE", "HH"): ("Hamburg",),
    ("DE", "HE"): ("Frankfurt am Main", "Wiesbaden", "Kassel", "Darmstadt"),
    ("DE", "NI"): ("Hanover", "Brunswick", "Oldenburg"),
    ("DE", "NW"): ("Cologne", "Düsseldorf", "Dortmund", "Essen", "Bonn"),
    ("DE", "SN"): ("Dresden", "Leipzig", "Chemnitz"),
    ("AE", "AZ"): ("Abu Dhabi", "Al Ain", "Ruwais"),
    ("AE", "AJ"): ("Ajman",),
    ("AE", "DU"): ("Dubai", "Hatta", "Jebel Ali"),
    ("AE", "FU"): ("Fujairah", "Dibba Al-Fujairah"),
    ("AE", "RK"): ("Ras al-Khaimah",),
    ("AE", "SH"): ("Sharjah", "Khor Fakkan", "Kalba"),
    ("AE", "UQ"): ("Umm al-Quwain",),
    ("US", "CA"): ("Los Angeles", "San Francisco", "San Diego", "San Jose", "Sacramento"),
    ("US", "FL"): ("Miami", "Orlando", "Tampa", "Jacksonville"),
    ("US", "IL"): ("Chicago", "Springfield"),
    ("US", "MA"): ("Boston", "Cambridge"),
    ("US", "NY"): ("New York City", "Buffalo", "Rochester", "Albany"),
    ("US", "TX"): ("Houston", "Dallas", "Austin", "San Antonio"),
    ("US", "WA"): ("Seattle", "Spokane"),
    ("CH", "BE"): ("Bern", "Biel/Bienne", "Thun"),
    ("CH", "BS"): ("Basel",),
    ("CH", "GE"): ("Geneva",),
    ("CH", "LU"): ("Lucerne",),
    ("CH", "TI"): ("Lugano", "Locarno", "Bellinzona"),
    ("CH", "VD"): ("Lausanne", "Montreux"),
    ("CH", "ZG"): ("Zug",),
    ("CH", "ZH"): ("Zürich", "Winterthur"),
    ("GB", "ENG"): ("London", "Manchester", "Birmingham", "Liverpool", "Leeds", "Bristol"),
    ("GB", "NIR"): ("Belfast", "Derry"),
    ("GB", "SCT"): ("Edinburgh", "Glasgow", "Aberdeen"),
    ("GB", "WLS"): ("Cardiff", "Swansea"),
    ("NO", "03"): ("Oslo",),
    ("NO", "11"): ("Stavanger", "Sandnes"),
    ("NO", "42"): ("Kristiansand",),
    ("NO", "46"): ("Bergen",),
    ("NO", "50"): ("Trondheim",),
    ("NO", "55"): ("Tromsø",),
}

TURKISH_DISTRICTS: dict[str, tuple[str, ...]] = {
    "Adana": (
        "Aladağ", "Ceyhan", "Çukurova", "Feke", "İmamoğlu", "Karaisalı", "Karataş", "Kozan",
        "Pozantı", "Saimbeyli", "Sarıçam", "Seyhan", "Tufanbeyli", "Yumurtalık", "Yüreğir",
    ),
    "Adıyaman": ("Besni", "Çelikhan", "Gerger", "Gölbaşı", "Kahta", "Merkez", "Samsat", "Sincik", "Tut"),
    "Afyonkarahisar": (
        "Başmakçı", "Bayat", "Bolvadin", "Çay", "Çobanlar", "Dazkırı", "Dinar", "Emirdağ", "Evciler",
        "Hocalar", "İhsaniye", "İscehisar", "Kızılören", "Merkez", "Sandıklı", "Sinanpaşa",
        "Sultandağı", "Şuhut",
    ),
    "Ağrı": ("Diyadin", "Doğubayazıt", "Eleşkirt", "Hamur", "Merkez", "Patnos", "Taşlıçay", "Tutak"),
    "Amasya": ("Göynücek", "Gümüşhacıköy", "Hamamözü", "Merkez", "Merzifon", "Suluova", "Taşova"),
    "Ankara": (
        "Akyurt", "Altındağ", "Ayaş", "Bala", "Beypazarı", "Çamlıdere", "Çankaya", "Çubuk", "Elmadağ",
        "Etimesgut", "Evren", "Gölbaşı", "Güdül", "Haymana", "Kahramankazan", "Kalecik", "Keçiören",
        "Kızılcahamam", "Mamak", "Nallıhan", "Polatlı", "Pursaklar", "Sincan", "Şereflikoçhisar",
        "Yenimahalle",
    ),
    "Antalya": (
        "Akseki", "Aksu", "Alanya", "Demre", "Döşemealtı", "Elmalı", "Finike", "Gazipaşa", "Gündoğmuş",
        "İbradı", "Kaş", "Kemer", "Kepez", "Konyaaltı", "Korkuteli", "Kumluca", "Manavgat", "Muratpaşa",
        "Serik",
    ),
    "Artvin": ("Ardanuç", "Arhavi", "Borçka", "Hopa", "Kemalpaşa", "Merkez", "Murgul", "Şavşat", "Yusufeli"),
    "Aydın": (
        "Bozdoğan", "Buharkent", "Çine", "Didim", "Efeler", "Germencik", "İncirliova", "Karacasu",
        "Karpuzlu", "Koçarlı", "Köşk", "Kuşadası", "Kuyucak", "Nazilli", "Söke", "Sultanhisar",
        "Yenipazar",
    ),
    "Balıkesir": (
        "Altıeylül", "Ayvalık", "Balya", "Bandırma", "Bigadiç", "Burhaniye", "Dursunbey", "Edremit",
        "Erdek", "Gömeç", "Gönen", "Havran", "İvrindi", "Karesi", "Kepsut", "Manyas", "Marmara",
        "Savaştepe", "Sındırgı", "Susurluk",
    ),
    "Bilecik": ("Bozüyük", "Gölpazarı", "İnhisar", "Merkez", "Osmaneli", "Pazaryeri", "Söğüt", "Yenipazar"),
    "Bingöl": ("Adaklı", "Genç", "Karlıova", "Kiğı", "Merkez", "Solhan", "Yayladere", "Yedisu"),
    "Bitlis": ("Adilcevaz", "Ahlat", "Güroymak", "Hizan", "Merkez", "Mutki", "Tatvan"),
    "Bolu": ("Dörtdivan", "Gerede", "Göynük", "Kıbrıscık", "Mengen", "Merkez", "Mudurnu", "Seben", "Yeniçağa"),
    "Burdur": (
        "Ağlasun", "Altınyayla", "Bucak", "Çavdır", "Çeltikçi", "Gölhisar", "Karamanlı", "Kemer",
        "Merkez", "Tefenni", "Yeşilova",
    ),
    "Bursa": (
        "Büyükorhan", "Gemlik", "Gürsu", "Harmancık", "İnegöl", "İznik", "Karacabey", "Keles", "Kestel",
        "Mudanya", "Mustafakemalpaşa", "Nilüfer", "Orhaneli", "Orhangazi", "Osmangazi", "Yenişehir",
        "Yıldırım",
    ),
    "Çanakkale": (
        "Ayvacık", "Bayramiç", "Biga", "Bozcaada", "Çan", "Eceabat", "Ezine", "Gelibolu", "Gökçeada",
        "Lapseki", "Merkez", "Yenice",
    ),
    "Çankırı": (
        "Atkaracalar", "Bayramören", "Çerkeş", "Eldivan", "Ilgaz", "Kızılırmak", "Korgun", "Kurşunlu",
        "Merkez", "Orta", "Şabanözü", "Yapraklı",
    ),
    "Çorum": (
        "Alaca", "Bayat", "Boğazkale", "Dodurga", "İskilip", "Kargı", "Laçin", "Mecitözü", "Merkez",
        "Oğuzlar", "Ortaköy", "Osmancık", "Sungurlu", "Uğurludağ",
    ),
    "Denizli": (
        "Acıpayam", "Babadağ", "Baklan", "Bekilli", "Beyağaç", "Bozkurt", "Buldan", "Çal", "Çameli",
        "Çardak", "Çivril", "Güney", "Honaz", "Kale", "Merkezefendi", "Pamukkale", "Sarayköy",
        "Serinhisar", "Tavas",
    ),
    "Diyarbakır": (
        "Bağlar", "Bismil", "Çermik", "Çınar", "Çüngüş", "Dicle", "Eğil", "Ergani", "Hani", "Hazro",
        "Kayapınar", "Kocaköy", "Kulp", "Lice", "Silvan", "Sur", "Yenişehir",
    ),
    "Edirne": ("Enez", "Havsa", "İpsala", "Keşan", "Lalapaşa", "Meriç", "Merkez", "Süloğlu", "Uzunköprü"),
    "Elazığ": (
        "Ağın", "Alacakaya", "Arıcak", "Baskil", "Karakoçan", "Keban", "Kovancılar", "Maden", "Merkez",
        "Palu", "Sivrice",
    ),
    "Erzincan": ("Çayırlı", "İliç", "Kemah", "Kemaliye", "Merkez", "Otlukbeli", "Refahiye", "Tercan", "Üzümlü"),
    "Erzurum": (
        "Aşkale", "Aziziye", "Çat", "Hınıs", "Horasan", "İspir", "Karaçoban", "Karayazı", "Köprüköy",
        "Narman", "Oltu", "Olur", "Palandöken", "Pasinler", "Pazaryolu", "Şenkaya", "Tekman", "Tortum",
        "Uzundere", "Yakutiye",
    ),
    "Eskişehir": (
        "Alpu", "Beylikova", "Çifteler", "Günyüzü", "Han", "İnönü", "Mahmudiye", "Mihalgazi",
        "Mihalıççık", "Odunpazarı", "Sarıcakaya", "Seyitgazi", "Sivrihisar", "Tepebaşı",
    ),
    "Gaziantep": (
        "Araban", "İslahiye", "Karkamış", "Nizip", "Nurdağı", "Oğuzeli", "Şahinbey", "Şehitkamil",
        "Yavuzeli",
    ),
    "Giresun": (
        "Alucra", "Bulancak", "Çamoluk", "Çanakçı", "Dereli", "Doğankent", "Espiye", "Eynesil", "Görele",
        "Güce", "Keşap", "Merkez", "Piraziz", "Şebinkarahisar", "Tirebolu", "Yağlıdere",
    ),
    "Gümüşhane": ("Kelkit", "Köse", "Kürtün", "Merkez", "Şiran", "Torul"),
    "Hakkari": ("Çukurca", "Derecik", "Merkez", "Şemdinli", "Yüksekova"),
    "Hatay": (
        "Altınözü", "Antakya", "Arsuz", "Belen", "Defne", "Dörtyol", "Erzin", "Hassa", "İskenderun",
        "Kırıkhan", "Kumlu", "Payas", "Reyhanlı", "Samandağ", "Yayladağı",
    ),
    "Isparta": (
        "Aksu", "Atabey", "Eğirdir", "Gelendost", "Gönen", "Keçiborlu", "Merkez", "Senirkent", "Sütçüler",
        "Şarkikaraağaç", "Uluborlu", "Yalvaç", "Yenişarbademli",
    ),
    "Mersin": (
        "Akdeniz", "Anamur", "Aydıncık", "Bozyazı", "Çamlıyayla", "Erdemli", "Gülnar", "Mezitli", "Mut",
        "Silifke", "Tarsus", "Toroslar", "Yenişehir",
    ),
    "İstanbul": (
        "Adalar", "Arnavutköy", "Ataşehir", "Avcılar", "Bağcılar", "Bahçelievler", "Bakırköy",
        "Başakşehir", "Bayrampaşa", "Beşiktaş", "Beykoz", "Beylikdüzü", "Beyoğlu", "Büyükçekmece",
        "Çatalca", "Çekmeköy", "Esenler", "Esenyurt", "Eyüpsultan", "Fatih", "Gaziosmanpaşa",
        "Güngören", "Kadıköy", "Kağıthane", "Kartal", "Küçükçekmece", "Maltepe", "Pendik",
        "Sancaktepe", "Sarıyer", "Silivri", "Sultanbeyli", "Sultangazi", "Şile", "Şişli", "Tuzla",
        "Ümraniye", "Üsküdar", "Zeytinburnu",
    ),
    "İzmir": (
        "Aliağa", "Balçova", "Bayındır", "Bayraklı", "Bergama", "Beydağ", "Bornova", "Buca", "Çeşme",
        "Çiğli", "Dikili", "Foça", "Gaziemir", "Güzelbahçe", "Karabağlar", "Karaburun", "Karşıyaka",
        "Kemalpaşa", "Kınık", "Kiraz", "Konak", "Menderes", "Menemen", "Narlıdere", "Ödemiş",
        "Seferihisar", "Selçuk", "Tire", "Torbalı", "Urla",
    ),
    "Kars": ("Akyaka", "Arpaçay", "Digor", "Kağızman", "Merkez", "Sarıkamış", "Selim", "Susuz"),
    "Kastamonu": (
        "Abana", "Ağlı", "Araç", "Azdavay", "Bozkurt", "Cide", "Çatalzeytin", "Daday", "Devrekani",
        "Doğanyurt", "Hanönü", "İhsangazi", "İnebolu", "Küre", "Merkez", "Pınarbaşı", "Seydiler",
        "Şenpazar", "Taşköprü", "Tosya",
    ),
    "Kayseri": (
        "Akkışla", "Bünyan", "Develi", "Felahiye", "Hacılar", "İncesu", "Kocasinan", "Melikgazi",
        "Özvatan", "Pınarbaşı", "Sarıoğlan", "Sarız", "Talas", "Tomarza", "Yahyalı", "Yeşilhisar",
    ),
    "Kırklareli": (
        "Babaeski", "Demirköy", "Kofçaz", "Lüleburgaz", "Merkez", "Pehlivanköy", "Pınarhisar", "Vize",
    ),
    "Kırşehir": ("Akçakent", "Akpınar", "Boztepe", "Çiçekdağı", "Kaman", "Merkez", "Mucur"),
    "Kocaeli": (
        "Başiskele", "Çayırova", "Darıca", "Derince", "Dilovası", "Gebze", "Gölcük", "İzmit", "Kandıra",
        "Karamürsel", "Kartepe", "Körfez",
    ),
    "Konya": (
        "Ahırlı", "Akören", "Akşehir", "Altınekin", "Beyşehir", "Bozkır", "Cihanbeyli", "Çeltik",
        "Çumra", "Derbent", "Derebucak", "Doğanhisar", "Emirgazi", "Ereğli", "Güneysınır", "Hadim",
        "Halkapınar", "Hüyük", "Ilgın", "Kadınhanı", "Karapınar", "Karatay", "Kulu", "Meram",
        "Sarayönü", "Selçuklu", "Seydişehir", "Taşkent", "Tuzlukçu", "Yalıhüyük", "Yunak",
    ),
    "Kütahya": (
        "Altıntaş", "Aslanapa", "Çavdarhisar", "Domaniç", "Dumlupınar", "Emet", "Gediz", "Hisarcık",
        "Merkez", "Pazarlar", "Simav", "Şaphane", "Tavşanlı",
    ),
    "Malatya": (
        "Akçadağ", "Arapgir", "Arguvan", "Battalgazi", "Darende", "Doğanşehir", "Doğanyol", "Hekimhan",
        "Kale", "Kuluncak", "Pütürge", "Yazıhan", "Yeşilyurt",
    ),
    "Manisa": (
        "Ahmetli", "Akhisar", "Alaşehir", "Demirci", "Gölmarmara", "Gördes", "Kırkağaç", "Köprübaşı",
        "Kula", "Salihli", "Sarıgöl", "Saruhanlı", "Selendi", "Soma", "Şehzadeler", "Turgutlu",
        "Yunusemre",
    ),
    "Kahramanmaraş": (
        "Afşin", "Andırın", "Çağlayancerit", "Dulkadiroğlu", "Ekinözü", "Elbistan", "Göksun", "Nurhak",
        "Onikişubat", "Pazarcık", "Türkoğlu",
    ),
    "Mardin": (
        "Artuklu", "Dargeçit", "Derik", "Kızıltepe", "Mazıdağı", "Midyat", "Nusaybin", "Ömerli", "Savur",
        "Yeşilli",
    ),
    "Muğla": (
        "Bodrum", "Dalaman", "Datça", "Fethiye", "Kavaklıdere", "Köyceğiz", "Marmaris", "Menteşe",
        "Milas", "Ortaca", "Seydikemer", "Ula", "Yatağan",
    ),
    "Muş": ("Bulanık", "Hasköy", "Korkut", "Malazgirt", "Merkez", "Varto"),
    "Nevşehir": ("Acıgöl", "Avanos", "Derinkuyu", "Gülşehir", "Hacıbektaş", "Kozaklı", "Merkez", "Ürgüp"),
    "Niğde": ("Altunhisar", "Bor", "Çamardı", "Çiftlik", "Merkez", "Ulukışla"),
    "Ordu": (
        "Akkuş", "Altınordu", "Aybastı", "Çamaş", "Çatalpınar", "Çaybaşı", "Fatsa", "Gölköy", "Gülyalı",
        "Gürgentepe", "İkizce", "Kabadüz", "Kabataş", "Korgan", "Kumru", "Mesudiye", "Perşembe",
        "Ulubey", "Ünye",
    ),
    "Rize": (
        "Ardeşen", "Çamlıhemşin", "Çayeli", "Derepazarı", "Fındıklı", "Güneysu", "Hemşin", "İkizdere",
        "İyidere", "Kalkandere", "Merkez", "Pazar",
    ),
    "Sakarya": (
        "Adapazarı", "Akyazı", "Arifiye", "Erenler", "Ferizli", "Geyve", "Hendek", "Karapürçek",
        "Karasu", "Kaynarca", "Kocaali", "Pamukova", "Sapanca", "Serdivan", "Söğütlü", "Taraklı",
    ),
    "Samsun": (
        "19 Mayıs", "Alaçam", "Asarcık", "Atakum", "Ayvacık", "Bafra", "Canik", "Çarşamba", "Havza",
        "İlkadım", "Kavak", "Ladik", "Salıpazarı", "Tekkeköy", "Terme", "Vezirköprü", "Yakakent",
    ),
    "Siirt": ("Baykan", "Eruh", "Kurtalan", "Merkez", "Pervari", "Şirvan", "Tillo"),
    "Sinop": ("Ayancık", "Boyabat", "Dikmen", "Durağan", "Erfelek", "Gerze", "Merkez", "Saraydüzü", "Türkeli"),
    "Sivas": (
        "Akıncılar", "Altınyayla", "Divriği", "Doğanşar", "Gemerek", "Gölova", "Gürün", "Hafik",
        "İmranlı", "Kangal", "Koyulhisar", "Merkez", "Suşehri", "Şarkışla", "Ulaş", "Yıldızeli", "Zara",
    ),
    "Tekirdağ": (
        "Çerkezköy", "Çorlu", "Ergene", "Hayrabolu", "Kapaklı", "Malkara", "Marmaraereğlisi", "Muratlı",
        "Saray", "Süleymanpaşa", "Şarköy",
    ),
    "Tokat": (
        "Almus", "Artova", "Başçiftlik", "Erbaa", "Merkez", "Niksar", "Pazar", "Reşadiye", "Sulusaray",
        "Turhal", "Yeşilyurt", "Zile",
    ),
    "Trabzon": (
        "Akçaabat", "Araklı", "Arsin", "Beşikdüzü", "Çarşıbaşı", "Çaykara", "Dernekpazarı", "Düzköy",
        "Hayrat", "Köprübaşı", "Maçka", "Of", "Ortahisar", "Sürmene", "Şalpazarı", "Tonya",
        "Vakfıkebir", "Yomra",
    ),
    "Tunceli": ("Çemişgezek", "Hozat", "Mazgirt", "Merkez", "Nazımiye", "Ovacık", "Pertek", "Pülümür"),
    "Şanlıurfa": (
        "Akçakale", "Birecik", "Bozova", "Ceylanpınar", "Eyyübiye", "Halfeti", "Haliliye", "Harran",
        "Hilvan", "Karaköprü", "Siverek", "Suruç", "Viranşehir",
    ),
    "Uşak": ("Banaz", "Eşme", "Karahallı", "Merkez", "Sivaslı", "Ulubey"),
    "Van": (
        "Bahçesaray", "Başkale", "Çaldıran", "Çatak", "Edremit", "Erciş", "Gevaş", "Gürpınar",
        "İpekyolu", "Muradiye", "Özalp", "Saray", "Tuşba",
    ),
    "Yozgat": (
        "Akdağmadeni", "Aydıncık", "Boğazlıyan", "Çandır", "Çayıralan", "Çekerek", "Kadışehri", "Merkez",
        "Saraykent", "Sarıkaya", "Sorgun", "Şefaatli", "Yenifakılı", "Yerköy",
    ),
    "Zonguldak": ("Alaplı", "Çaycuma", "Devrek", "Ereğli", "Gökçebey", "Kilimli", "Kozlu", "Merkez"),
    "Aksaray": ("Ağaçören", "Eskil", "Gülağaç", "Güzelyurt", "Merkez", "Ortaköy", "Sarıyahşi", "Sultanhanı"),
    "Bayburt": ("Aydıntepe", "Demirözü", "Merkez"),
    "Karaman": ("Ayrancı", "Başyayla", "Ermenek", "Kazımkarabekir", "Merkez", "Sarıveliler"),
    "Kırıkkale": (
        "Bahşılı", "Balışeyh", "Çelebi", "Delice", "Karakeçili", "Keskin", "Merkez", "Sulakyurt",
        "Yahşihan",
    ),
    "Batman": ("Beşiri", "Gercüş", "Hasankeyf", "Kozluk", "Merkez", "Sason"),
    "Şırnak": ("Beytüşşebap", "Cizre", "Güçlükonak", "İdil", "Merkez", "Silopi", "Uludere"),
    "Bartın": ("Amasra", "Kurucaşile", "Merkez", "Ulus"),
    "Ardahan": ("Çıldır", "Damal", "Göle", "Hanak", "Merkez", "Posof"),
    "Iğdır": ("Aralık", "Karakoyunlu", "Merkez", "Tuzluca"),
    "Yalova": ("Altınova", "Armutlu", "Çiftlikköy", "Çınarcık", "Merkez", "Termal"),
    "Karabük": ("Eflani", "Eskipazar", "Merkez", "Ovacık", "Safranbolu", "Yenice"),
    "Kilis": ("Elbeyli", "Merkez", "Musabeyli", "Polateli"),
    "Osmaniye": ("Bahçe", "Düziçi", "Hasanbeyli", "Kadirli", "Merkez", "Sumbas", "Toprakkale"),
    "Düzce": ("Akçakoca", "Cumayeri", "Çilimli", "Gölyaka", "Gümüşova", "Kaynaşlı", "Merkez", "Yığılca"),
}
