from pydantic import BaseModel


class ExportedPost(BaseModel):
    post_id: int
    title: str
    published: str
    path: str


class ExportReport(BaseModel):
    exported: int = 0
    renamed: int = 0
    posts: list[ExportedPost] = []
    duration: float = 0.0
    dry_run: bool = False
