"""
Authorization gate.

Every inbound request is checked against an ordered table of path rules
before routing. The first rule whose pattern matches the path decides the
access policy; a path that matches no rule falls back to the default policy
(authentication required).

Patterns follow the Ant style:

- a literal segment matches itself
- ``*`` matches inside a single segment
- ``**`` matches zero or more whole segments

No authentication mechanism is wired yet. The default credential verifier
accepts nothing, so every request that needs authentication is rejected.
"""
from dataclasses import dataclass, field
from enum import Enum
from fnmatch import fnmatchcase
from typing import Callable, Iterable, List, Optional, Tuple

from fastapi.security.utils import get_authorization_scheme_param

from plataforma_cursos.core.config import Settings
from plataforma_cursos.core.errors import AuthenticationRequired

CredentialVerifier = Callable[[str], bool]


class AccessPolicy(str, Enum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"


class Decision(str, Enum):
    ADMITTED = "admitted"
    REJECTED = "rejected"


def _segments(path: str) -> List[str]:
    # "/a/b/" -> ["a", "b", ""]: la barra final cuenta como segmento vacío
    return path.split("/")[1:]


def is_normalized(path: str) -> bool:
    """True if ``path`` is absolute and has no empty, ``.`` or ``..`` segments."""
    if not path.startswith("/") or "\\" in path or "//" in path:
        return False
    return not any(segment in (".", "..") for segment in _segments(path))


def _match_segments(pattern: List[str], segments: List[str]) -> bool:
    if not pattern:
        return not segments

    head, rest = pattern[0], pattern[1:]
    if head == "**":
        return any(_match_segments(rest, segments[i:]) for i in range(len(segments) + 1))

    if not segments:
        return False
    return fnmatchcase(segments[0], head) and _match_segments(rest, segments[1:])


@dataclass(frozen=True)
class PathRule:
    pattern: str
    policy: AccessPolicy
    _compiled: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.pattern.startswith("/"):
            raise ValueError(f"Path pattern must start with '/': {self.pattern!r}")
        object.__setattr__(self, "_compiled", tuple(_segments(self.pattern)))

    def matches(self, path: str) -> bool:
        return _match_segments(list(self._compiled), _segments(path))


def deny_all_credentials(credential: str) -> bool:
    """Default verifier: there is no authentication mechanism yet."""
    return False


def extract_credential(authorization: Optional[str]) -> Optional[str]:
    """
    Devuelve el token de una cabecera ``Authorization: Bearer <token>``.

    Cualquier otro esquema, o una cabecera vacía, cuenta como "sin credencial".
    """
    if not authorization:
        return None

    scheme, token = get_authorization_scheme_param(authorization.strip())
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        return None
    return token


def build_path_rules(settings: Settings) -> Tuple[PathRule, ...]:
    """Build the rule table once, at process start."""
    actuator = settings.actuator_base_path.rstrip("/")
    api_v1 = settings.api_v1_str.rstrip("/")

    return (
        # Health checks del actuator
        PathRule(f"{actuator}/**", AccessPolicy.PUBLIC),
        PathRule(f"{api_v1}/ping", AccessPolicy.PUBLIC),
        # NOTE: /api/v1/info no es público aunque solo devuelve datos descriptivos
    )


class AuthorizationGate:
    """Pure admit/reject decision over (path, credential)."""

    def __init__(
        self,
        rules: Iterable[PathRule],
        default_policy: AccessPolicy = AccessPolicy.AUTHENTICATED,
        verifier: Optional[CredentialVerifier] = None,
    ):
        self.rules = tuple(rules)
        self.default_policy = default_policy
        self.verifier = verifier or deny_all_credentials

    def policy_for(self, path: str) -> AccessPolicy:
        # Una ruta no normalizada nunca hereda la política de una regla
        if not is_normalized(path):
            return self.default_policy

        for rule in self.rules:
            if rule.matches(path):
                return rule.policy
        return self.default_policy

    def evaluate(self, path: str, credential: Optional[str] = None) -> Decision:
        if self.policy_for(path) is AccessPolicy.PUBLIC:
            return Decision.ADMITTED
        if credential is not None and self.verifier(credential):
            return Decision.ADMITTED
        return Decision.REJECTED

    def authorize(self, path: str, credential: Optional[str] = None) -> None:
        """Raise ``AuthenticationRequired`` unless the request may proceed."""
        if self.evaluate(path, credential) is Decision.REJECTED:
            raise AuthenticationRequired(path)
