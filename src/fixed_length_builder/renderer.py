"""Raw value rendering for a single field."""

from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from fixed_length_builder.exceptions import FormatError, MissingFieldError
from fixed_length_builder.logging_config import get_logger
from fixed_length_builder.models import FieldRule, RuleKind

# Returns the "now" used for date fields
Clock = Callable[[], datetime]

logger = get_logger("renderer")


class FieldRenderer:
    """Produce the unpadded value of one field for one record.

    Dates are taken from the injected clock, so tests and batch runs can
    pin the timestamp.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self.clock: Clock = clock or datetime.now

    def render(self, rule: FieldRule, record: Mapping[str, Any]) -> Any:
        """Return the raw value for a field.

        String kinds return str; SOURCE returns the record value as is,
        which may be numeric.

        Raises:
            FormatError: template and args do not match
            MissingFieldError: source key absent from the record
        """
        if rule.kind is RuleKind.LITERAL:
            return rule.value
        if rule.kind is RuleKind.DATE:
            return self.clock().strftime(rule.format or "")
        if rule.kind is RuleKind.STRING:
            return self._render_template(rule)
        if rule.kind is RuleKind.SOURCE:
            try:
                return record[rule.key]
            except KeyError:
                raise MissingFieldError(rule.key) from None

        logger.debug("Field '%s' has no value and no known type, rendering empty", rule.key)
        return ""

    @staticmethod
    def _render_template(rule: FieldRule) -> str:
        template = rule.format or ""
        try:
            return template % rule.args
        except (TypeError, ValueError, KeyError) as e:
            raise FormatError(
                f"template {template!r} does not match args {list(rule.args)!r}: {e}",
                key=rule.key,
            ) from None
