"""Demo catalog used to seed development databases."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

_AGENT = {
    "id": "agent-irem",
    "name": "İrem Yılmaz",
    "phone": "+90 532 000 00 00",
    "email": "irem@example.com",
    "company": "IW Gayrimenkul",
}


def _at(day: int) -> datetime:
    return datetime(2025, 9, day, 9, 0, tzinfo=timezone.utc)


DEMO_LISTINGS: list[dict[str, Any]] = [
    {
        "id": "IW1757000000001abc",
        "slug": "satilik-emlak-deniz-manzarali-mustakil-ev",
        "type": "sale",
        "status": "active",
        "category": {"main": "Konut", "sub": "Müstakil Ev"},
        "title": "Deniz Manzaralı Müstakil Ev",
        "description": "Bodrum Yalıkavak'ta havuzlu, deniz manzaralı müstakil ev.",
        "price": 18_500_000,
        "location": {"country": "TR", "state": "48", "city": "Muğla", "district": "Bodrum"},
        "specs": {
            "netSize": 220,
            "grossSize": 260,
            "rooms": "4+1",
            "bathrooms": 3,
            "age": 5,
            "heating": "Yerden Isıtma",
            "furnishing": "Furnished",
            "balconyCount": 2,
        },
        "interiorFeatures": {"kitchenType": "Amerikan", "hasBuiltInKitchen": True, "hasParquet": True},
        "exteriorFeatures": {"facade": "Güney", "hasBalcony": True, "hasGarden": True, "hasSeaView": True},
        "buildingFeatures": {"hasPool": True, "hasCarPark": True, "hasSecurity": True},
        "propertyDetails": {
            "usageStatus": "Mülk Sahibi",
            "deedStatus": "Kat Mülkiyeti",
            "fromWho": "Emlak Ofisinden",
            "creditEligible": True,
            "isSettlement": True,
        },
        "images": ["https://res.cloudinary.com/demo/image/upload/irem-properties/bodrum-villa.jpg"],
        "agent": _AGENT,
        "createdAt": _at(1),
        "updatedAt": _at(1),
    },
    {
        "id": "IW1757000000002def",
        "slug": "satilik-emlak-kadikoy-moda-3-1-daire",
        "type": "sale",
        "status": "active",
        "category": {"main": "Konut", "sub": "Daire"},
        "title": "Kadıköy Moda 3+1 Daire",
        "description": "Moda sahiline yürüme mesafesinde asansörlü binada daire.",
        "price": 9_750_000,
        "location": {"country": "TR", "state": "34", "city": "İstanbul", "district": "Kadıköy"},
        "specs": {
            "netSize": 125,
            "grossSize": 140,
            "rooms": "3+1",
            "bathrooms": 2,
            "age": 12,
            "floor": 3,
            "totalFloors": 6,
            "heating": "Kombi Doğalgaz",
            "furnishing": "Unfurnished",
            "balconyCount": 1,
        },
        "interiorFeatures": {"kitchenType": "Kapalı", "hasSteelDoor": True},
        "exteriorFeatures": {"facade": "Batı", "hasBalcony": True, "hasCityView": True},
        "buildingFeatures": {"hasElevator": True, "hasCarPark": True},
        "propertyDetails": {
            "usageStatus": "Kiracılı",
            "deedStatus": "Kat Mülkiyeti",
            "fromWho": "Sahibinden",
            "creditEligible": True,
            "monthlyFee": 1_500,
        },
        "images": [],
        "agent": _AGENT,
        "createdAt": _at(5),
        "updatedAt": _at(5),
    },
    {
        "id": "IW1757000000003ghi",
        "slug": "kiralik-emlak-besiktas-esyali-1-1-rezidans",
        "type": "rent",
        "status": "active",
        "category": {"main": "Konut", "sub": "Rezidans"},
        "title": "Beşiktaş Eşyalı 1+1 Rezidans",
        "description": "Site içinde, spor salonlu ve 24 saat güvenlikli rezidans.",
        "price": 45_000,
        "location": {"country": "TR", "state": "34", "city": "İstanbul", "district": "Beşiktaş"},
        "specs": {
            "netSize": 60,
            "grossSize": 75,
            "rooms": "1+1",
            "bathrooms": 1,
            "age": 3,
            "floor": 12,
            "totalFloors": 30,
            "heating": "Merkezi (Pay Ölçer)",
            "furnishing": "Furnished",
        },
        "interiorFeatures": {"kitchenType": "Açık", "hasBuiltInKitchen": True},
        "exteriorFeatures": {"facade": "Kuzey", "hasCityView": True},
        "buildingFeatures": {
            "hasElevator": True,
            "hasClosedCarPark": True,
            "hasCarPark": True,
            "hasGym": True,
            "has24HourSecurity": True,
            "hasSecurity": True,
        },
        "propertyDetails": {"inSite": True, "monthlyFee": 4_000, "fromWho": "Emlak Ofisinden"},
        "images": [],
        "agent": _AGENT,
        "createdAt": _at(10),
        "updatedAt": _at(10),
    },
    {
        "id": "IW1757000000004jkl",
        "slug": "satilik-emlak-cesme-imarli-arsa",
        "type": "sale",
        "status": "active",
        "category": {"main": "Arsa", "sub": "İmarlı Arsa"},
        "title": "Çeşme İmarlı Arsa",
        "description": "Alaçatı'ya 5 dakika, konut imarlı arsa.",
        "price": 7_200_000,
        "location": {"country": "TR", "state": "35", "city": "İzmir", "district": "Çeşme"},
        "specs": {"netSize": 900},
        "propertyDetails": {"deedStatus": "Arsa Tapulu", "exchangeAvailable": True},
        "landDetails": {
            "zoningStatus": "Konut İmarlı",
            "pricePerSquareMeter": 8_000,
            "blockNumber": "112",
            "parcelNumber": "7",
            "floorAreaRatio": "0.30",
            "creditEligibility": "Uygun",
        },
        "images": [],
        "agent": _AGENT,
        "createdAt": _at(12),
        "updatedAt": _at(12),
    },
    {
        "id": "IW1757000000005mno",
        "slug": "kiralik-emlak-cankaya-ofis",
        "type": "rent",
        "status": "passive",
        "category": {"main": "İş Yeri", "sub": "Ofis"},
        "title": "Çankaya Ofis",
        "description": "Kızılay'a yakın, iş yeri ruhsatlı ofis katı.",
        "price": 30_000,
        "location": {"country": "TR", "state": "06", "city": "Ankara", "district": "Çankaya"},
        "specs": {"netSize": 150, "bathrooms": 2, "age": 20, "heating": "Merkezi Doğalgaz"},
        "buildingFeatures": {"hasElevator": True, "hasGenerator": True},
        "propertyDetails": {"isSuitableForOffice": True, "hasBusinessLicense": True},
        "images": [],
        "agent": _AGENT,
        "createdAt": _at(15),
        "updatedAt": _at(15),
    },
]
