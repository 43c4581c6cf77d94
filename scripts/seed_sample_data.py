#!/usr/bin/env python3
# scripts/seed_sample_data.py
"""
Create the clinic schema, load the sample data and print the reports.
Seeding is skipped when a complete sample is already loaded, so it is safe to rerun.
A partial seed (departments but no payments) is reported and exits with status 1.

Examples:
  # Create tables only
  python -m scripts.seed_sample_data --init-db

  # Create tables and load the sample rows
  python -m scripts.seed_sample_data --init-db --seed

  # Print every report (upcoming appointments from a given date)
  python -m scripts.seed_sample_data --report --since 2023-01-01 --doctor-id 1 --patient-id 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from clinic_domain.core.config import get_settings
from clinic_domain.core.database import init_db
from clinic_domain.core.errors import ClinicDomainError
from clinic_domain.services.clinic_model import ClinicModel
from clinic_domain.services.report_service import (
    appointments_per_department,
    doctor_patients,
    doctor_services,
    patient_prescriptions,
    payments_per_doctor,
    upcoming_appointments,
)
from clinic_domain.services.seed_service import SeedStatus, load_sample_data, sample_data_status

logger = logging.getLogger(__name__)


def print_reports(model: ClinicModel, *, since: date | None, doctor_id: int, patient_id: int) -> None:
    print("\nUpcoming scheduled appointments")
    for row in model.report(upcoming_appointments, on_or_after=since):
        print(
            f"  #{row.appointment_id} {row.appointment_date} {row.appointment_time} "
            f"{row.patient_name} with {row.doctor_name}"
        )

    print(f"\nPatients of doctor {doctor_id}")
    for row in model.report(doctor_patients, doctor_id=doctor_id):
        print(f"  {row.patient_name}: {row.total_appointments} appointment(s)")

    print(f"\nPrescriptions of patient {patient_id}")
    for row in model.report(patient_prescriptions, patient_id=patient_id):
        print(f"  {row.medication} {row.dosage or ''} ({row.appointment_date})")

    print("\nPaid payments per doctor")
    for row in model.report(payments_per_doctor):
        print(f"  {row.doctor_name}: {row.total_payments} ({row.payment_count} payment(s))")

    print("\nAppointments per department")
    for row in model.report(appointments_per_department):
        print(f"  {row.department}: {row.appointment_count}")

    print(f"\nServices offered by doctor {doctor_id}")
    for row in model.report(doctor_services, doctor_id=doctor_id):
        print(f"  {row.service_name}: {row.price}")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Clinic domain model setup and sample data")
    p.add_argument("--init-db", action="store_true", help="Create all tables (no-op for existing ones)")
    p.add_argument("--seed", action="store_true", help="Load the sample rows unless data already exists")
    p.add_argument("--report", action="store_true", help="Print the reporting queries")
    p.add_argument(
        "--since",
        type=date.fromisoformat,
        default=None,
        help="Upcoming appointments on or after this date (YYYY-MM-DD). Default: today",
    )
    p.add_argument("--doctor-id", type=int, default=1, help="Doctor for per-doctor reports (default: 1)")
    p.add_argument("--patient-id", type=int, default=1, help="Patient for the prescriptions report (default: 1)")
    return p.parse_args()


def main() -> None:
    args = parse_args()

    if not (args.init_db or args.seed or args.report):
        print("Nothing to do. Use --init-db, --seed and/or --report.")
        sys.exit(1)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    model = ClinicModel()
    try:
        if args.init_db:
            init_db()
            print(f"Schema ready on {settings.database_url}")

        if args.seed:
            seed_status = sample_data_status(model)
            if seed_status == SeedStatus.PARTIAL:
                logger.warning("Sample data is incomplete: departments exist but no payments")
                print("Database holds a partial seed (no payments). Reset the database and seed again.")
                sys.exit(1)
            elif seed_status == SeedStatus.COMPLETE:
                print("Database already has data. Skipping seed.")
            else:
                created = load_sample_data(model)
                print("Seed completed: " + ", ".join(f"{len(ids)} {name}" for name, ids in created.items()))

        if args.report:
            print_reports(model, since=args.since, doctor_id=args.doctor_id, patient_id=args.patient_id)

    except ClinicDomainError:
        logger.exception("Clinic setup failed")
        raise


if __name__ == "__main__":
    main()
