"""PasswordService — generate and validate, wrapped in ServiceResult.

Domain errors become ``ServiceError`` payloads keyed by the error's
``code``. Password values are never written to the log.
"""

from __future__ import annotations

import logging
import secrets

from pwctl.domain.errors import PasswordError, RandomSourceError
from pwctl.domain.generator import RandBelow, generate_many
from pwctl.domain.policy import check_rules, validate_password
from pwctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class PasswordService:
    """Entry point for both core operations.

    Args:
        randbelow: Secure integer source forwarded to the generator.
    """

    def __init__(self, randbelow: RandBelow = secrets.randbelow) -> None:
        self._randbelow = randbelow

    def generate(self, length: int, *, count: int = 1) -> ServiceResult:
        """Generate *count* passwords of *length* characters."""
        op = "generate"
        try:
            passwords = generate_many(length, count, randbelow=self._randbelow)
        except RandomSourceError as exc:
            logger.error("Secure random source failed: %s", exc)
            return _error(op, exc, length=length)
        except PasswordError as exc:
            logger.debug("Generation rejected: %s", exc)
            return _error(op, exc, length=length, count=count)

        data: dict[str, object] = {"length": length, "count": count}
        if count == 1:
            data["password"] = passwords[0]
        else:
            data["passwords"] = passwords
        return ServiceResult(ok=True, op=op, data=data)

    def validate(self, password: str) -> ServiceResult:
        """Check *password* against the composition policy."""
        op = "validate"
        result = validate_password(password)
        rules = {str(rule): passed for rule, passed in check_rules(password).items()}
        logger.debug("Validated password: valid=%s rule=%s", result.valid, result.rule)
        if result.valid:
            return ServiceResult(
                ok=True,
                op=op,
                data={"valid": True, "message": result.message, "rules": rules},
            )
        return ServiceResult(
            ok=False,
            op=op,
            data={"valid": False, "message": result.message, "rules": rules},
            error=ServiceError(
                code="WEAK_PASSWORD",
                message=result.message,
                detail={"rule": str(result.rule)},
            ),
        )


def _error(op: str, exc: PasswordError, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=str(exc), detail=dict(detail)),
    )
