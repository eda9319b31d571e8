from srccli.api.client import ApiFlags, Client, Request, operation_name
from srccli.api.errors import GraphQLError, GraphQLErrors, HTTPStatusError

__all__ = [
    "ApiFlags",
    "Client",
    "GraphQLError",
    "GraphQLErrors",
    "HTTPStatusError",
    "Request",
    "operation_name",
]
