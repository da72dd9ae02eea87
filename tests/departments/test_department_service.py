import pytest

from src.printpress.printpress.core.exceptions import NotFoundError, ValidationError
from src.printpress.printpress.departments.model import DepartmentPatch
from src.printpress.printpress.employees.model import EmployeePatch


def test_create_rejects_duplicate_names(container):
    service = container.department_service
    service.create(name="Printing", description="Presses")

    with pytest.raises(ValidationError):
        service.create(name="printing")


def test_delete_refused_while_employees_assigned(container, add_employee):
    service = container.department_service
    department_id = service.create(name="Binding")
    employee_id = add_employee(department="Binding")

    with pytest.raises(ValidationError):
        service.delete(department_id)

    container.employee_service.update(employee_id, EmployeePatch(department="Printing"))
    service.delete(department_id)

    with pytest.raises(NotFoundError):
        service.get(department_id)


def test_update_department(container):
    service = container.department_service
    department_id = service.create(name="Design")

    updated = service.update(department_id, DepartmentPatch.from_payload({"description": "Prepress"}))

    assert updated.description == "Prepress"
    with pytest.raises(NotFoundError):
        service.update("missing", DepartmentPatch(description="x"))
