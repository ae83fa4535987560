# =============================================================================
# app/validation.py - Validation Chain Dependency
# =============================================================================
# Adapts the rule engine in lib/validation.py to FastAPI. A ValidationChain is
# used as a route dependency; it reads path parameters and the JSON body,
# evaluates its rules and either raises RequestValidationFailed (rendered as
# 400 by app/exceptions.py) or hands the raw input to the handler.
#
# Usage:
#   chain = ValidationChain(ID_RULES)
#
#   @router.get("/{id}")
#   async def get_item(data: Annotated[ValidatedInput, Depends(chain)]):
#       ...
# =============================================================================

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from fastapi import Request

from app.exceptions import RequestValidationFailed
from lib.validation import Rule, evaluate_rules

logger = logging.getLogger(__name__)


@dataclass
class ValidatedInput:
    """Request input that passed every rule of a chain."""

    params: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)

    def int_param(self, name: str) -> int:
        return int(self.params[name])


def _body_error(message: str) -> RequestValidationFailed:
    return RequestValidationFailed([
        {"location": "body", "field": "", "value": None, "msg": message}
    ])


class ValidationChain:
    """Ordered rules evaluated before a route handler runs."""

    def __init__(self, rules: list[Rule]):
        self.rules = list(rules)

    @property
    def reads_body(self) -> bool:
        return any(rule.location == "body" for rule in self.rules)

    async def __call__(self, request: Request) -> ValidatedInput:
        params = dict(request.path_params)
        body = await self._read_body(request) if self.reads_body else {}

        errors = evaluate_rules(self.rules, params=params, body=body)
        if errors:
            logger.debug(
                f"Validation failed for {request.method} {request.url.path}: "
                f"{[error['msg'] for error in errors]}"
            )
            raise RequestValidationFailed(errors)

        return ValidatedInput(params=params, body=body)

    @staticmethod
    async def _read_body(request: Request) -> dict[str, Any]:
        raw = await request.body()
        if not raw.strip():
            return {}

        try:
            body = json.loads(raw)
        except ValueError:
            raise _body_error("Malformed JSON body")

        if not isinstance(body, dict):
            raise _body_error("JSON body must be an object")
        return body
