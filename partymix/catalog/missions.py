# partymix/catalog/missions.py
# Random party missions - a shared pool plus a few per-cocktail extras

# Repeated entries are intentional: each copy is one more ticket in the draw.

# ============ CLASSIC PACK ============

CLASSIC_COMMON = [
    "왼손만 사용해서 젓기",
    "모두의 건배사 담당하기",
    "다음 잔 나올 때까지 영어만 쓰기",
    "가장 좋아하는 과일을 한 단어로 외치기",
    "모두에게 칭찬 한 마디씩 하기",
    "바텐더에게 감사 인사하기",
    "10초간 얼음만 바라보기 챌린지",
    "랜덤 게스트와 잔 바꿔 들고 포즈 찍기",
    "가장 시원한 표정 지어보기",
]

CLASSIC_BY_RECIPE = {
    "mojito": ["민트 잎으로 하트 모양 만들기", "라임 웨지로 미니 아트 만들기"],
    "rum_peach": ["복숭아 이모지만으로 감상 표현하기 🍑"],
    "peach_crush": ["선셋 사진 찍어 단톡방에 올리기"],
    "peach_highball": ["하이볼 버블이 가장 많이 보이는 각도 찾기"],
    "fiji_peach": ["라임 향을 맡고 한 줄 감상 쓰기"],
    "peach_milk": ["한 모금 마시고 디저트 평론가처럼 묘사하기"],
    "jimbeam_highball": ["가장 청량한 건배 멘트 만들기"],
}

# ============ TEAM NIGHT PACK ============
# Host-led games for a team dinner; "사회자" is the evening's MC.

TEAM_NIGHT_COMMON = [
    "왼손만 사용해서 젓기",
    "모두의 건배사 담당하기",
    "다음 잔 나올 때까지 영어만 쓰기",
    "다음 잔 나올 때까지 외래어 안쓰기",
    "10분간 금지어: '네'",
    "10분간 금지어: '형'",
    "10분간 금지어: '아니'",
    "10분간 금지어: '근데'",
    "10분간 금지어: '약간'",
    "10분간 금지어: '그러니까'",
    "10분간 금지어: '진짜'",
    "10분간 금지어: '뭔가'",
    "10분간 금지어: '솔직히'",
    "10분간 금지어: '맞아'",
    "10분간 금지어: '그리고'",
    "10분간 금지어: 'optimiztion'",
    "10분간 금지어: 'cocktail'",
    "사회자가 정해주는 단어 몸으로 말해요",
    "오늘 착장에 '흰색'이 포함된 사람에게 술 한잔 말아주기 (벌칙주 가능)",
    "모두에게 칭찬 한 마디씩 하기",
    "사회자에게 감사 인사하기",
    "집주인에게 감사 인사하기",
    "그룹장에게 감사 인사하기",
    "제일 피곤해보이는사람 술 말아주기 (벌칙주 가능)",
    "노래방에서 골든 완창 하기 (노래방 가서 하기)",
    "10초간 얼음만 바라보기 챌린지",
    "랜덤 게스트와 잔 바꿔 들고 포즈 찍기",
    "가장 시원한 표정 지어보기",
    "AI Data TF에서 가장 재수없는 사람은? (+팩폭 한마디)",
    "AI Data TF에서 가장 고마운 사람은? (+감사인사 한마디)",
    "우리 팀에서 자동화 하면 행복지수 오르는 작업 1개 (3인 이상 동의 시 성공)",
    "앉은 자리에서 오른쪽 옆사람과 러브샷",
    "칭찬 3연타: 오른쪽 사람의 장점 3가지 구체적으로 말하기",
    "동료 중 디버깅 도움 1위에게 감사 한 마디",
    "금지어 5개: AI, Data, Model, PPT, 장표 쓰지 않고 오늘 업무 설명",
    "리듬 박수: 사회자가 친 패턴 그대로 따라 치기 (3회 성공 시 성공)",
    "이구 동성: 사회자가 정해준 한명과 '하트' 동작 똑같이 하기",
    "이구 동성: 사회자가 정해준 한명과 '감사' 동작 똑같이 하기",
    "이구 동성: 사회자가 정해준 한명과 '노예' 동작 똑같이 하기",
    "눈싸움: 오른쪽 사람과 눈싸움 (이긴사람이 진 사람에게 벌칙주)",
    "오른쪽 사람이 정한 숫자 맞추기 (0~99)",
    "귀엽고 깜찍한 포즈 (5인 이상 동의 시 성공)",
    "어부바: 오른쪽에 있는 사람 업고 3초 버티기",
    "오른쪽 사람이 정해주는 숫자의 팀 멤버에게 카톡으로 진지하게 감사 인사 하기 (이름 순)",
    "나보다 키 큰사람 다 마셔^^",
    "모두에게 인디언 밥~ 맞기",
    "오른쪽 사람이 만들어주는 안주 맛있게 먹기^^ (레몬 가능)",
    "나 빼고 다 원샷!",
    "앉았다 일어났다 5회!",
    "코끼리코 5바퀴!",
    "오른쪽 사람이 정해주는 사진으로 하루동안 카톡 프사 하기 (킹받는 사진 가능)",
    "술자리 퀴즈왕 1개 뽑기",
    "술자리 퀴즈왕 1개 뽑기",
    "술자리 퀴즈왕 1개 뽑기",
    "술자리 퀴즈왕 1개 뽑기",
    "흑역사 썰 풀기 (3인 이상 동의 시 성공)",
]

TEAM_NIGHT_BY_RECIPE = {
    "mojito": ["민트 잎으로 하트 모양 만들기", "라임 웨지로 미니 아트 만들기", "모히또 3행시"],
    "rum_peach": ["복숭아 이모지만으로 감상 표현하기 🍑", "오른쪽 사람이 비율 조절"],
    "peach_crush": ["선셋 사진 찍어 단톡방에 올리기"],
    "peach_highball": ["하이볼 버블이 가장 많이 보이는 각도 찾기"],
    "fiji_peach": ["라임 향을 맡고 한 줄 감상 쓰기"],
    "peach_milk": ["한 모금 마시고 디저트 평론가처럼 묘사하기"],
    "jimbeam_highball": ["가장 청량한 건배 멘트 만들기", "장원영 짐빔 하이볼 광고 따라하기^^", "오늘의 럭키비키 사고 하나"],
}

# Pack name -> (common, by_recipe)
MISSION_PACKS = {
    "classic": (CLASSIC_COMMON, CLASSIC_BY_RECIPE),
    "team_night": (TEAM_NIGHT_COMMON, TEAM_NIGHT_BY_RECIPE),
}

DEFAULT_MISSION_PACK = "classic"
