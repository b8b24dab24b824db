from __future__ import annotations

from typing import Literal

# pydantic only accepts typing_extensions.TypedDict before Python 3.12
from typing_extensions import TypedDict

# ==== News API v2 ====


class ArticleSource(TypedDict):
    id: str | None
    name: str


class Article(TypedDict):
    source: ArticleSource
    author: str | None
    title: str
    description: str | None
    url: str
    urlToImage: str | None
    publishedAt: str
    content: str | None


class ArticlesResponse(TypedDict):
    status: Literal["ok"]
    totalResults: int
    articles: list[Article]


# ==== JSON Placeholder ====


class Post(TypedDict):
    userId: int
    id: int
    title: str
    body: str


class NewPost(TypedDict):
    userId: int
    title: str
    body: str


class CreatedPost(NewPost):
    id: int


class TopHeadlinesParams(TypedDict, total=False):
    country: str
    category: str
    q: str
    pageSize: int


def make_new_post(title: str, body: str, user_id: int) -> NewPost:
    return {
        "userId": user_id,
        "title": title,
        "body": body,
    }
