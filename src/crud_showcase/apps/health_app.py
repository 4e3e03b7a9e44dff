"""Healthcare Program - patients and their prescriptions."""

import logging
from datetime import date, timedelta
from typing import Callable, Optional

from rich.console import Console

from crud_showcase.apps.base import ConsoleProgram
from crud_showcase.domain.health import Patient, Prescription, group_by_patient
from crud_showcase.domain.repository import Repository

logger = logging.getLogger(__name__)


class HealthSystemApp(ConsoleProgram):
    """Seeds patients and prescriptions and prints them per patient."""

    def __init__(
        self,
        console: Optional[Console] = None,
        today: Callable[[], date] = date.today
    ):
        super().__init__(console)
        self.today = today
        self.patient_repo: Repository[Patient] = Repository(Patient)
        self.prescription_repo: Repository[Prescription] = Repository(Prescription)
        self.prescription_map: dict[int, list[Prescription]] = {}

    def seed_data(self) -> None:
        """Add three sample patients and five prescriptions."""
        self.patient_repo.add(Patient(id=1, name="John Doe", age=45, gender="Male"))
        self.patient_repo.add(Patient(id=2, name="Jane Smith", age=32, gender="Female"))
        self.patient_repo.add(Patient(id=3, name="Robert Johnson", age=58, gender="Male"))

        today = self.today()
        samples = [
            (101, 1, "Lisinopril 10mg", 30),
            (102, 1, "Metformin 500mg", 15),
            (201, 2, "Ibuprofen 200mg", 7),
            (202, 2, "Amoxicillin 500mg", 3),
            (301, 3, "Atorvastatin 20mg", 60),
        ]
        for prescription_id, patient_id, medication, days_ago in samples:
            self.prescription_repo.add(Prescription(
                id=prescription_id,
                patient_id=patient_id,
                medication_name=medication,
                date_issued=today - timedelta(days=days_ago),
            ))
        logger.info(
            f"Seeded {len(self.patient_repo)} patients and {len(self.prescription_repo)} prescriptions"
        )

    def build_prescription_map(self) -> None:
        """Group every prescription under its patient ID."""
        self.prescription_map = group_by_patient(self.prescription_repo.get_all())

    def get_prescriptions_by_patient_id(self, patient_id: int) -> list[Prescription]:
        """Return a copy of the prescriptions mapped to ``patient_id``."""
        return list(self.prescription_map.get(patient_id, []))

    def print_all_patients(self) -> None:
        self.write()
        self.write("=== PATIENTS ===")
        for patient in self.patient_repo.get_all():
            self.write(str(patient))
        self.write("================")
        self.write()

    def print_prescriptions_for_patient(self, patient_id: int) -> None:
        patient = self.patient_repo.find(lambda p: p.id == patient_id)
        if patient is None:
            self.write(f"Patient with ID {patient_id} not found.")
            return

        self.write()
        self.write(f"=== PRESCRIPTIONS FOR {patient.name.upper()} ===")

        prescriptions = self.get_prescriptions_by_patient_id(patient_id)
        if prescriptions:
            for prescription in prescriptions:
                self.write(f"- {prescription}")
        else:
            self.write("No prescriptions found for this patient.")

        self.write("==================================")
        self.write()

    def run(self) -> None:
        self.write("=== Healthcare Management System ===")
        self.write()

        self.write("Loading sample data...")
        self.seed_data()

        self.write("Building prescription database...")
        self.write()
        self.build_prescription_map()

        self.print_all_patients()

        self.write("Displaying prescriptions for each patient...")
        self.write()
        for patient in self.patient_repo.get_all():
            self.print_prescriptions_for_patient(patient.id)

        self.write()
        self.write("=== End of Report ===")
