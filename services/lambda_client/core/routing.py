"""
Where: services/lambda_client/core/routing.py
What: Split routing strings into a Lambda FunctionName and a request path.
Why: Both client operations address functions as "<function>/<path>".
"""

from services.lambda_client.core.exceptions import InvalidRouteError
from services.lambda_client.models.envelope import Route


def split_route(route: str) -> Route:
    """
    Split a routing string at its first '/'.

    Everything before the slash is the function identifier (name, name with
    qualifier, or ARN); the slash and everything after it is the path.

    - `svc/items` -> (`svc`, `/items`)
    - `svc:prod/v1/graphql` -> (`svc:prod`, `/v1/graphql`)
    - `/items` -> (``, `/items`)

    Raises:
        InvalidRouteError: the route contains no '/'
    """
    index = route.find("/")
    if index == -1:
        raise InvalidRouteError(route)
    return Route(function_name=route[:index], path=route[index:])
