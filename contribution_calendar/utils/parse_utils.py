# utils/parse_utils.py
def normalize_entry_text(text: str | None) -> str:
    """
    일정 입력값 정리
    '  소풍 ' -> '소풍'
    None / 공백만 -> '' (등록 불가)
    """
    if not text:
        return ""
    return text.strip()


def is_blank(text: str | None) -> bool:
    # None / '' / 공백만 → 빈 일정
    return not normalize_entry_text(text)
