# emptrack/domains/rpt/schemas.py

from datetime import date

from emptrack.core.schemas import APIModel


class SalarySum(APIModel):
    department_id: int
    total_salary: float


class VisitCount(APIModel):
    visit_date: date
    total_visits: int
