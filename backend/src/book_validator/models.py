from pydantic import BaseModel


class TitleComparison(BaseModel):
    a: str
    b: str
    same: bool
    skeleton_a: str
    skeleton_b: str


class TitleCheck(BaseModel):
    title: str
    valid: bool


class PageCount(BaseModel):
    """Result of count_pages() for one expression."""
    expression: str
    pages: int | None
    status: str  # "ok", "invalid" (malformed, pages == 0), "undefined" (too long / imprecise)

    @classmethod
    def from_count(cls, expression: str, pages: int | None) -> "PageCount":
        if pages is None:
            status = "undefined"
        elif pages == 0:
            status = "invalid"
        else:
            status = "ok"
        return cls(expression=expression, pages=pages, status=status)
