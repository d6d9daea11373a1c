"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "러스티 행성 찾기",
        "en": "Rusty Planet Finder",
    },
    "btn_reset": {
        "ko": "초기화",
        "en": "Reset",
    },
    "btn_calculate": {
        "ko": "계산하기",
        "en": "Calculate",
    },
    "label_bulk_upload": {
        "ko": "CSV 일괄 업로드",
        "en": "Bulk upload CSV",
    },
    "help_bulk_upload": {
        "ko": "헤더 이름은 입력 항목 키와 같아야 해요 (예: planetName, radius)",
        "en": "Headers must match field names (e.g. planetName, radius)",
    },
    "loading_catalog": {
        "ko": "✦ 행성 데이터를 불러오는 중",
        "en": "✦ Loading planet data",
    },
    "error_catalog": {
        "ko": "행성 데이터를 불러오지 못했어요. ({error})",
        "en": "Could not load planet data. ({error})",
    },
    "error_bulk": {
        "ko": "CSV를 읽을 수 없어요. ({error})",
        "en": "Invalid CSV. ({error})",
    },
    "no catalog data": {
        "ko": "불러온 행성 데이터가 없어요",
        "en": "No planet data loaded",
    },
    "no match found": {
        "ko": "일치하는 행성을 찾지 못했어요",
        "en": "No match found",
    },
    "heading_match": {
        "ko": "가장 가까운 행성",
        "en": "Closest Match",
    },
    "label_score": {
        "ko": "일치 항목 수",
        "en": "Matching attributes",
    },
    "heading_bulk": {
        "ko": "일괄 결과 ({count}행)",
        "en": "Bulk Results ({count} rows)",
    },
    "btn_download": {
        "ko": "↓ 결과 CSV 저장",
        "en": "↓ Download results CSV",
    },
    "heading_map": {
        "ko": "카탈로그 위치 (적경/적위)",
        "en": "Catalog positions (RA/Dec)",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key


# Attribute form labels. English comes from schema.ATTRIBUTE_FIELDS.
_FIELD_LABELS_KO: dict[str, str] = {
    "radius": "반지름",
    "density": "밀도",
    "parsecs": "지구로부터 거리 (파섹)",
    "planetMass": "행성 질량",
    "vMagnitude": "V (존슨) 등급",
    "orbitalPeriod": "공전 주기",
    "eccentricity": "이심률",
    "insolation": "복사 플럭스",
    "eqTemp": "평형 온도",
    "stellarType": "항성 분광형",
    "stellarTeff": "항성 유효 온도",
    "stellarRadius": "항성 반지름",
    "stellarMass": "항성 질량",
    "stellarMetallicity": "항성 금속함량",
    "stellarGravity": "항성 표면 중력",
    "systemDistance": "계 거리",
    "systemVmag": "계 V 등급",
    "systemKmag": "계 Ks 등급",
    "systemGaiaMag": "Gaia 등급",
    "ra": "적경 (RA)",
    "dec": "적위 (Dec)",
    "hostName": "모항성 이름",
    "planetName": "행성 이름",
    "discoveryMethod": "발견 방법",
}


def field_label(key: str, default: str, lang: str) -> str:
    """Return the form label for an attribute key, or default for English/unknown."""
    if lang == "ko":
        return _FIELD_LABELS_KO.get(key, default)
    return default
