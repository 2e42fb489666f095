from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Sequence

from ..common.numbers import ZERO, money, to_decimal
from ..common.validators import require_national_id, require_non_empty
from ..core.enums import EmployeeType
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee registry (register, edit, soft delete)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    @staticmethod
    def _parse_type(value: object) -> EmployeeType:
        employee_type = EmployeeType.from_label(value)
        if employee_type == EmployeeType.UNKNOWN:
            raise ValidationError("Tipo de empleado no válido (Producción o Al Día)")
        return employee_type

    @staticmethod
    def _salary_for(employee_type: EmployeeType, monthly_salary: object) -> Decimal:
        if employee_type == EmployeeType.PRODUCTION:
            return ZERO
        return to_decimal(monthly_salary)

    def _ensure_unique_national_id(self, national_id: str, *, exclude_id: Optional[int] = None) -> None:
        existing = self._employees.get_active_by_national_id(national_id)
        if existing and existing.employee_id != exclude_id:
            raise ConflictError("Ya existe un empleado con este DNI")

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee or not employee.is_active:
            raise NotFoundError("Empleado no encontrado")
        return employee

    def register_employee(
        self,
        *,
        national_id: str,
        name: str,
        employee_type: object,
        monthly_salary: object = None,
    ) -> int:
        national_id = require_national_id(national_id)
        name = require_non_empty(name, "Nombre")
        etype = self._parse_type(employee_type)
        self._ensure_unique_national_id(national_id)

        employee_id = self._employees.create_employee(
            national_id=national_id,
            name=name,
            employee_type=etype,
            monthly_salary=self._salary_for(etype, monthly_salary),
        )
        logger.info("employee registered id=%s type=%s", employee_id, etype.value)
        return employee_id

    def update_employee(
        self,
        employee_id: int,
        *,
        national_id: str,
        name: str,
        employee_type: object,
        monthly_salary: object = None,
    ) -> Employee:
        current = self.get_employee(employee_id)

        national_id = require_national_id(national_id)
        name = require_non_empty(name, "Nombre")
        etype = self._parse_type(employee_type)
        self._ensure_unique_national_id(national_id, exclude_id=current.employee_id)

        salary = self._salary_for(etype, monthly_salary)
        if not self._employees.update_employee(
            employee_id=current.employee_id,
            national_id=national_id,
            name=name,
            employee_type=etype,
            monthly_salary=salary,
        ):
            raise NotFoundError("Empleado no encontrado")

        logger.info("employee updated id=%s type=%s", current.employee_id, etype.value)
        return Employee(
            employee_id=current.employee_id,
            national_id=national_id,
            name=name,
            employee_type=etype,
            monthly_salary=salary,
            is_active=True,
        )

    def remove_employee(self, employee_id: int) -> None:
        current = self.get_employee(employee_id)
        self._employees.set_active(current.employee_id, is_active=False)
        logger.info("employee removed id=%s", current.employee_id)

    @staticmethod
    def to_dict(employee: Employee) -> dict:
        return {
            "id": employee.employee_id,
            "dni": employee.national_id,
            "name": employee.name,
            "type": employee.employee_type.value,
            "monthly_salary": money(employee.monthly_salary),
            "is_active": employee.is_active,
        }
