"""Gateway policy hooks.

Policies are declared in the gateway config; applying them only records that
they ran. Payloads pass through unchanged.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List

logger = logging.getLogger(__name__)

CONTENT_SAFETY = "content-safety"
DERMATOLOGY_DOMAIN = "dermatology-domain"

ACTIVE_POLICY_RULES = ["content-safety-active", "domain-validation-active"]


def apply_policies(data: Any, policy_names: Iterable[str]) -> Any:
    names = list(policy_names)
    logger.info("Applying policies: %s", ", ".join(names))
    return data


def get_active_policy_rules() -> List[str]:
    return list(ACTIVE_POLICY_RULES)
