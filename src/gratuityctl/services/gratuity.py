"""GratuityService — collect input, compute, and wrap the outcome."""

from __future__ import annotations

import structlog

from gratuityctl.domain.gratuity import InvalidInputError, compute
from gratuityctl.services.base import BaseService
from gratuityctl.services.intake import RawValue, collect_input
from gratuityctl.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)

OP = "calculate_gratuity"


class GratuityService(BaseService):
    """Run one gratuity calculation per call."""

    def calculate(
        self,
        basic_salary: RawValue,
        years_worked: RawValue,
        months_worked: RawValue = None,
        *,
        include_allowances: bool = False,
        allowances: RawValue = None,
    ) -> ServiceResult:
        """Calculate the gratuity for raw user-entered values.

        Invalid input yields ``ok=False`` with error code ``INVALID_INPUT``;
        sanitization adjustments are reported as warnings.
        """
        data, warnings = collect_input(
            basic_salary,
            years_worked,
            months_worked,
            include_allowances,
            allowances,
            policy=self._settings.input,
        )

        try:
            result = compute(data, currency=self._settings.display.currency)
        except InvalidInputError as exc:
            log.info("gratuity.rejected", field=exc.field, value=str(exc.value))
            return ServiceResult(
                ok=False,
                op=OP,
                warnings=warnings,
                error=ServiceError(
                    code="INVALID_INPUT",
                    message=str(exc),
                    detail={"field": exc.field, "value": str(exc.value)},
                ),
            )

        log.debug(
            "gratuity.computed",
            service_years=str(result.service_years),
            total=str(result.total_gratuity),
            capped=result.was_capped,
        )
        return ServiceResult(
            ok=True,
            op=OP,
            data=result.model_dump(mode="json"),
            warnings=warnings,
            meta={
                "currency": self._settings.display.currency,
                "input": data.model_dump(mode="json"),
            },
        )
