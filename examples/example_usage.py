"""Example: use the service layer directly (no UI).

Saves a month for one employee, then asks for the prefill of the next month.
"""

from src.salary_sheet.salary_sheet.main import create_container


def main():
    container = create_container()
    service = container.salary_sheet_service

    service.submit_form("E001", {"month": "2024-05", "basicSalary": "1500", "overtime": "4", "remarks": "promo"})
    prefill = service.prefill("E001", "2024-06")
    print(prefill.source.value, prefill.entry)


if __name__ == "__main__":
    main()
