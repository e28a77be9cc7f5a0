# partymix/catalog/recipes.py
# Party cocktail recipes - name, tagline, colour, ingredients, build steps

# Format: one dict per recipe, in display order (first entry is the default pick)
# Ingredient units: ml, piece, leaf, g, wedge
RECIPE_DATA = [
    {
        "id": "mojito",
        "name": "모히또",
        "tagline": "민트 향 터지는 섬 한 잔!",
        "color": "#10b981",
        "ingredients": [
            {"name": "럼", "amount": 45, "unit": "ml"},
            {"name": "라임", "amount": 0.5, "unit": "piece", "note": "즙 + 조각"},
            {"name": "민트", "amount": 7, "unit": "leaf"},
            {"name": "설탕/시럽", "amount": 10, "unit": "ml"},
            {"name": "토닉", "amount": 105, "unit": "ml", "range": (90, 120)},
        ],
        "howto": [
            "잔에 라임즙·시럽·민트를 넣고 살살 빻기",
            "얼음 가득 → 럼 → 토닉",
            "바스푼으로 1–2회 가볍게 스터",
        ],
    },

    {
        "id": "rum_peach",
        "name": "럼&피치",
        "tagline": "상큼 달콤, 해변 산책!",
        "color": "#f59e0b",
        "ingredients": [
            {"name": "럼", "amount": 40, "unit": "ml"},
            {"name": "피치트리", "amount": 20, "unit": "ml"},
            {"name": "오렌지주스", "amount": 120, "unit": "ml"},
            {"name": "토닉", "amount": 20, "unit": "ml", "note": "살짝"},
        ],
        "howto": ["얼음 가득 잔에 빌드", "부드럽게 1–2회 스터"],
    },

    {
        "id": "peach_crush",
        "name": "피치크러시",
        "tagline": "복숭아 x 크랜베리의 선셋!",
        "color": "#ef4444",
        "ingredients": [
            {"name": "럼", "amount": 30, "unit": "ml"},
            {"name": "피치트리", "amount": 20, "unit": "ml"},
            {"name": "오렌지주스", "amount": 80, "unit": "ml"},
            {"name": "크랜베리주스", "amount": 40, "unit": "ml"},
        ],
        "howto": ["얼음 → 모든 재료 빌드", "색감 레이어를 살짝 유지"],
    },

    {
        "id": "peach_highball",
        "name": "피치트리 하이볼",
        "tagline": "심플 이즈 베스트, 달달 하이볼",
        "color": "#f97316",
        "ingredients": [
            {"name": "피치트리", "amount": 45, "unit": "ml"},
            {"name": "토닉", "amount": 120, "unit": "ml"},
        ],
        "howto": ["차가운 잔/얼음 → 피치트리 → 토닉", "1–2회만 스터"],
    },

    {
        "id": "fiji_peach",
        "name": "피지 피치트리",
        "tagline": "피치 하이볼 + 라임의 상쾌함",
        "color": "#22c55e",
        "ingredients": [
            {"name": "피치트리", "amount": 45, "unit": "ml"},
            {"name": "토닉", "amount": 120, "unit": "ml"},
            {"name": "라임", "amount": 0.5, "unit": "piece"},
        ],
        "howto": ["피치트리와 토닉 빌드", "라임 웨지로 짜 넣고 가니시"],
    },

    {
        "id": "peach_milk",
        "name": "피치밀크",
        "tagline": "달콤 크리미 디저트 잔",
        "color": "#fb7185",
        "ingredients": [
            {"name": "피치트리", "amount": 30, "unit": "ml"},
            {"name": "우유", "amount": 90, "unit": "ml"},
        ],
        "howto": ["얼음 → 피치트리 → 우유", "가볍게 스터"],
    },

    {
        "id": "jimbeam_highball",
        "name": "짐빔 하이볼",
        "tagline": "깔끔 시원, 모두의 하이볼",
        "color": "#60a5fa",
        "ingredients": [
            {"name": "짐빔", "amount": 45, "unit": "ml"},
            {"name": "토닉", "amount": 150, "unit": "ml"},
            {"name": "레몬", "amount": 0.15, "unit": "piece", "note": "가니시(1개로 6–8잔)"},
        ],
        "howto": ["얼음 가득 → 위스키 → 차가운 토닉", "1–2회만 스터"],
    },
]
