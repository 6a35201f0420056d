"""
Caller identity helpers.
"""
import logging
import re
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

# e.g. "cognito-idp.<region>.amazonaws.com/<pool>,...:CognitoSignIn:<sub>"
_COGNITO_SIGN_IN = re.compile(r'CognitoSignIn:([A-Za-z0-9-]{36})')


def get_user_id(identity: Mapping[str, Any]) -> Optional[str]:
    """
    Extract the user's Cognito subject identifier from an identity context.

    Prefers the 'sub' claim (user pool authorizers). Falls back to parsing
    'cognitoIdentityAuthProvider' (IAM / identity pool authorizers).

    Args:
        identity: The identity part of the request context

    Returns:
        The subject identifier, or None if it cannot be determined
    """
    sub = identity.get('sub')
    if sub:
        return sub

    provider = identity.get('cognitoIdentityAuthProvider') or ''
    match = _COGNITO_SIGN_IN.search(provider)
    if not match:
        logger.warning(f"No Cognito sign-in found in auth provider: {provider!r}")
        return None
    return match.group(1)
