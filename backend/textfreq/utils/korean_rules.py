"""
Rule tables for keyword classification.
Korean particles, predicate endings, function nouns and stopwords.

Ordered tables are tuples (first match wins, authored order is precedence).
Membership tables are frozensets. Everything is authored as str and encoded
to UTF-8 bytes once at import time; the analyzer works on bytes.
"""
from typing import FrozenSet, Iterable, Tuple


def _encode_all(words: Iterable[str]) -> Tuple[bytes, ...]:
    return tuple(w.encode("utf-8") for w in words)


# 조사 (Particles) - 긴 복합 조사가 짧은 조사보다 먼저 와야 한다
JOSA_ENDINGS_TEXT = (
    # 복합 조사
    "에게서는", "에게서도", "에서부터", "으로부터", "으로써는", "으로서는",
    "으로써", "으로서", "으로는", "으로도", "에게서", "에게는", "에게도",
    "한테서", "한테는", "에서는", "에서도", "께서는", "까지는", "까지도",
    "부터는", "부터도", "이라도", "이라는", "이라고", "이나마", "로부터",
    "로써는", "로서는",
    # 두 글자 조사
    "에게", "한테", "께서", "에서", "에는", "에도", "까지", "부터", "으로",
    "이나", "이랑", "처럼", "만큼", "보다", "마저", "조차", "라도", "라는",
    "라고", "로서", "로써", "로는", "로도", "과는", "와는", "과도", "와도",
    "들은", "들이", "들을", "들의", "들도",
    # 한 글자 조사
    "의", "에", "로", "은", "는", "이", "가", "을", "를", "와", "과",
    "도", "만", "랑", "들",
)

# 대명사/지시어 + 조사 형태
PRONOUN_FORMS_TEXT = frozenset({
    "나는", "나를", "나의", "내가", "나도", "나에게",
    "너는", "너를", "너의", "네가", "너도", "너에게",
    "저는", "저를", "저의", "제가", "저도", "저에게",
    "우리는", "우리가", "우리를", "우리의", "우리도",
    "저희는", "저희가", "저희를", "저희의",
    "그는", "그가", "그를", "그의", "그도", "그에게",
    "그녀는", "그녀가", "그녀를", "그녀의",
    "이는", "이를", "이에", "이가",
    "이것은", "이것이", "이것을", "이것도",
    "그것은", "그것이", "그것을", "그것도",
    "저것은", "저것이", "저것을",
    "여기는", "여기에", "여기서", "거기는", "거기에", "거기서",
    "저기는", "저기에", "저기서",
    "누구는", "누가", "무엇을", "무엇이", "뭐가",
})

# 불용어: 접속사, 후치사, 지시어, 대명사
KOREAN_STOPWORDS_TEXT = frozenset({
    # 조사 (Particles)
    "은", "는", "이", "가", "을", "를", "의", "에", "에서", "로", "으로",
    "와", "과", "하고", "이나", "나", "부터", "까지", "만", "도", "조차",
    "마저", "밖에", "뿐", "만큼", "처럼", "같이", "보다", "에게", "한테",
    "께서", "에게서", "한테서", "으로써", "으로서",

    # 대명사/지시어 (Pronouns, demonstratives)
    "나", "너", "저", "우리", "저희", "그", "그녀", "그것", "이것", "저것",
    "여기", "저기", "거기", "어디", "무엇", "누구", "언제", "어떻게", "왜",
    "이런", "그런", "저런", "어떤", "이러한", "그러한", "저러한",

    # 접속사/연결 (Conjunctions)
    "그리고", "그러나", "그런데", "그래서", "따라서", "하지만", "그렇지만",
    "그러므로", "그러면", "그리하여", "또한", "또", "및", "혹은", "또는",
    "즉", "곧", "만약", "만일", "게다가", "더구나", "오히려", "한편",
    "때문에", "위해", "통해", "대해", "등",

    # 부사 (Adverbs) - 의미가 적은 것들
    "매우", "아주", "너무", "정말", "진짜", "상당히", "다소", "약간",
    "조금", "많이", "가장", "제일", "항상", "자주", "가끔", "이미", "벌써",
    "아직", "바로", "다시", "모두", "함께", "서로",
})

# English stopwords: articles, conjunctions, prepositions, be-verbs, pronouns
ENGLISH_STOPWORDS_TEXT = frozenset({
    "the", "a", "an", "and", "or", "but", "to", "of", "in", "on", "for",
    "with", "as", "at", "by", "from", "not",
    "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
    "this", "that", "these", "those",
    "it", "its", "i", "you", "he", "she", "we", "they", "them",
    "my", "your", "our", "their",
})

# 금지 끝말: 동사/형용사 활용형, 부사형 연결어, 관계 표현
BANNED_ENDINGS_TEXT = (
    # 서술형 어미
    "습니다", "입니다", "합니다", "됩니다", "있었다", "없었다",
    "하였다", "되었다", "가진다", "받는다",
    "한다", "된다", "있다", "없다", "했다", "됐다", "였다", "었다", "았다",
    "겠다", "는다", "간다", "온다", "본다", "준다", "난다", "이다", "하다",
    "되다", "같다", "않다", "났다", "냈다", "졌다", "왔다", "갔다", "봤다",
    "줬다",
    # 연결형 어미
    "하면서", "되면서", "하지만", "하므로", "하여서", "위하여", "의하여",
    "하며", "되며", "하면", "되면", "하여", "해서", "돼서", "하게", "하지",
    "하고", "되고", "으며", "면서", "지만", "는데", "니까", "므로", "도록",
    "거나", "려고", "으면", "다고", "다며", "다는",
    # 관형형 어미
    "하는", "되는", "있는", "없는", "했던", "되던", "스러운", "로운",
    "다운", "적인", "같은",
    # 부사형
    "스럽게", "적으로", "롭게", "하게도",
    # 관계 표현
    "관련한", "관련된", "관한", "대한", "위한", "의한", "인한", "따른",
    "통한", "대해", "위해", "통해", "따라",
)

# 의미가 약한 기능 명사 (것, 경우, 때 등)
FUNCTION_NOUNS_TEXT = frozenset({
    "것", "거", "수", "때", "중", "등", "점", "데", "바", "줄", "뿐",
    "경우", "정도", "부분", "측면", "사실", "자체", "내용", "상황",
    "이후", "이전", "동안", "사이", "가지", "종류", "때문", "이상",
    "여러", "모든", "각각", "대부분", "관련", "관계", "방법", "방식",
    "형태", "형식", "결과", "과정", "문제", "생각", "얘기", "이야기",
    "오늘", "어제", "내일", "지금", "현재", "당시", "순간", "시간",
    "하나", "다음", "처음", "마지막", "자신", "여러분",
})

# 명사일 가능성이 매우 높은 끝말
STRONG_NOUN_SUFFIX_TEXT = (
    "위원회", "협회", "센터", "시스템", "플랫폼", "정책", "제도", "산업",
    "사업", "기술", "시장", "정부", "기관", "기업", "단체", "협약",
    "성", "력", "화", "론", "학", "권", "률", "율", "법", "책", "계",
    "감", "청", "원", "국", "회", "부", "처", "소",
)

# 서술어 종결 표지
PREDICATE_FINAL_TEXT = "다"

# "다"로 끝나지만 서술어가 아닌 명사
DA_NOUNS_TEXT = frozenset({"바다", "소다", "판다"})

# 관형형 어미 (다양한, 중요한)
ADNOMINAL_FINAL_TEXT = "한"

# "한"으로 끝나지만 관형형이 아닌 명사
HAN_NOUNS_TEXT = frozenset({"권한", "제한", "기한", "무한", "시한", "유한"})

# 불완전하게 활용이 제거된 동사/형용사 어간 잔여물
STEM_RESIDUES_TEXT = (
    "시키", "당하", "스러", "하", "되", "있", "없", "받", "같", "않", "싶",
)


JOSA_ENDINGS: Tuple[bytes, ...] = _encode_all(JOSA_ENDINGS_TEXT)
PRONOUN_FORMS: FrozenSet[bytes] = frozenset(_encode_all(PRONOUN_FORMS_TEXT))
KOREAN_STOPWORDS: FrozenSet[bytes] = frozenset(_encode_all(KOREAN_STOPWORDS_TEXT))
ENGLISH_STOPWORDS: FrozenSet[bytes] = frozenset(_encode_all(ENGLISH_STOPWORDS_TEXT))
BANNED_ENDINGS: Tuple[bytes, ...] = _encode_all(BANNED_ENDINGS_TEXT)
FUNCTION_NOUNS: FrozenSet[bytes] = frozenset(_encode_all(FUNCTION_NOUNS_TEXT))
STRONG_NOUN_SUFFIX: Tuple[bytes, ...] = _encode_all(STRONG_NOUN_SUFFIX_TEXT)
PREDICATE_FINAL: bytes = PREDICATE_FINAL_TEXT.encode("utf-8")
DA_NOUNS: FrozenSet[bytes] = frozenset(_encode_all(DA_NOUNS_TEXT))
ADNOMINAL_FINAL: bytes = ADNOMINAL_FINAL_TEXT.encode("utf-8")
HAN_NOUNS: FrozenSet[bytes] = frozenset(_encode_all(HAN_NOUNS_TEXT))
STEM_RESIDUES: Tuple[bytes, ...] = _encode_all(STEM_RESIDUES_TEXT)

# Combined stopwords
ALL_STOPWORDS: FrozenSet[bytes] = KOREAN_STOPWORDS | ENGLISH_STOPWORDS


def is_stopword(word: bytes) -> bool:
    """
    Check if a word is a stopword.

    Args:
        word: UTF-8 encoded word (already lowercased for English)

    Returns:
        True if word is a stopword
    """
    return word in ALL_STOPWORDS


def ends_with_any(word: bytes, endings: Iterable[bytes]) -> bool:
    """Return True if word ends with any of the given endings."""
    return any(word.endswith(ending) for ending in endings)
