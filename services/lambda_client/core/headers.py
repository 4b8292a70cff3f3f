"""
Authentication header composition.

Every invocation carries the account, the user and the serialized access
policy so that the backend function can authorize the call.
"""

from typing import Dict, Iterable, Mapping, Tuple

from services.lambda_client.models.envelope import AccessPolicy

ACCOUNT_HEADER = "LifeOmic-Account"
USER_HEADER = "LifeOmic-User"
CONTENT_TYPE_HEADER = "content-type"
POLICY_HEADER = "LifeOmic-Policy"

FIXED_HEADERS = (ACCOUNT_HEADER, USER_HEADER, CONTENT_TYPE_HEADER, POLICY_HEADER)


def serialize_policy(rules: Mapping[str, bool]) -> str:
    """Serialize rules as compact JSON: {"rules": {...}}."""
    return AccessPolicy(rules=dict(rules)).model_dump_json()


def build_auth_headers(account: str, user: str, rules: Mapping[str, bool]) -> Dict[str, str]:
    """
    Build the four fixed headers sent on every invocation.

    Args:
        account: Account id
        user: User id
        rules: Authorization rules for the policy header

    Returns:
        A new dict; callers may extend it freely.
    """
    return {
        ACCOUNT_HEADER: account,
        USER_HEADER: user,
        CONTENT_TYPE_HEADER: "application/json",
        POLICY_HEADER: serialize_policy(rules),
    }


def merge_headers(
    auth_headers: Dict[str, str], extra: Iterable[Tuple[str, str]]
) -> Dict[str, str]:
    """
    Merge caller headers under the fixed authentication headers.

    `extra` is an iterable of (name, value) pairs in which a name may repeat.
    Names are compared exactly as given, so a fixed header always wins over a
    caller header with the same key. Repeated names (compared case-insensitively,
    as HTTP does) collapse to their first value; the envelope carries a single
    string per header.
    """
    headers = dict(auth_headers)
    seen = set()
    for name, value in extra:
        folded = name.lower()
        if folded in seen:
            continue
        seen.add(folded)
        if name not in headers:
            headers[name] = value
    return headers
