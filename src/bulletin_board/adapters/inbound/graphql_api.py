"""Strawberry GraphQL adapter for the Bulletin Board.

Schema:
    type Query {
        getAllPosts(page: Int!, per_page: Int!): [Post!]!
        getPost(id: ID!): Post
    }
    type Mutation {
        createPost(input: NewPost!): Post!
        updatePost(id: ID!, input: UpdatePost!): Post!
        deletePost(id: ID!): Boolean!
    }

Post ids are the repository's integers rendered as strings. Repository
failures become GraphQL error entries whose message matches the REST error
body and whose extensions carry code, kind and detail.

Usage:
    from bulletin_board.adapters.inbound.graphql_api import create_graphql_router

    app.include_router(create_graphql_router(repository))

References:
    - ports/inbound (PostRepositoryPort)
    - DESIGN.md (GraphQL adapter)
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional

import strawberry
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.schema.config import StrawberryConfig
from strawberry.types import Info

from bulletin_board.adapters.inbound.parsing import parse_post_id
from bulletin_board.domain.entities.post import Post
from bulletin_board.domain.value_objects.errors import PostError, unexpected_error
from bulletin_board.infrastructure.logging import get_logger
from bulletin_board.ports.inbound import PostRepositoryPort

logger = get_logger("graphql_api")


@strawberry.type(name="Post")
class PostType:
    """A bulletin-board post."""

    id: strawberry.ID
    title: str
    content: str

    @classmethod
    def from_post(cls, post: Post) -> "PostType":
        return cls(id=strawberry.ID(str(post.id)), title=post.title, content=post.content)


@strawberry.input
class NewPost:
    """Fields of a post to create."""

    title: str
    content: str


@strawberry.input
class UpdatePost:
    """Replacement title and content; empty strings are stored as given."""

    title: str
    content: str


def to_graphql_error(error: PostError) -> GraphQLError:
    """Translate a repository failure into a GraphQL error entry."""
    return GraphQLError(
        error.message,
        extensions={
            "code": error.code,
            "kind": error.kind.value,
            "detail": error.detail,
        },
    )


@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except PostError as e:
        raise to_graphql_error(e) from e
    except Exception as e:
        logger.error("unhandled_resolver_error", exc_info=e)
        raise to_graphql_error(unexpected_error()) from e


def _repository(info: Info) -> PostRepositoryPort:
    return info.context["repository"]


@strawberry.type
class Query:
    @strawberry.field(name="getAllPosts")
    def get_all_posts(self, info: Info, page: int, per_page: int) -> list[PostType]:
        """One page of posts in insertion order."""
        with _translate_errors():
            posts = _repository(info).list(page, per_page)
        return [PostType.from_post(p) for p in posts]

    @strawberry.field(name="getPost")
    def get_post(self, info: Info, id: strawberry.ID) -> Optional[PostType]:
        with _translate_errors():
            post = _repository(info).get(parse_post_id(id))
        return PostType.from_post(post)


@strawberry.type
class Mutation:
    @strawberry.mutation(name="createPost")
    def create_post(self, info: Info, input: NewPost) -> PostType:
        with _translate_errors():
            post = _repository(info).create(input.title, input.content)
        return PostType.from_post(post)

    @strawberry.mutation(name="updatePost")
    def update_post(self, info: Info, id: strawberry.ID, input: UpdatePost) -> PostType:
        with _translate_errors():
            post = _repository(info).update(parse_post_id(id), input.title, input.content)
        return PostType.from_post(post)

    @strawberry.mutation(name="deletePost")
    def delete_post(self, info: Info, id: strawberry.ID) -> bool:
        with _translate_errors():
            return _repository(info).delete(parse_post_id(id))


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    config=StrawberryConfig(auto_camel_case=False),
)


def create_graphql_router(
    repository: PostRepositoryPort,
    path: str = "/v1/gql/query",
    graphql_ide: bool = True,
) -> GraphQLRouter:
    """Create the GraphQL router for post management.

    Args:
        repository: Repository every resolver delegates to.
        path: Endpoint path; POST executes operations, GET serves the IDE.
        graphql_ide: Serve GraphiQL on GET.

    Returns:
        Router to include in a FastAPI application.
    """

    def get_context() -> dict[str, Any]:
        return {"repository": repository}

    return GraphQLRouter(
        schema,
        path=path,
        graphql_ide="graphiql" if graphql_ide else None,
        context_getter=get_context,
    )
