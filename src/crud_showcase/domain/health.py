"""Healthcare Records - Patients and Prescriptions.

Security Impact:
    - These records hold demo data only; names are printed as-is

Architecture:
    - Pure pydantic models with zero infrastructure dependencies
    - Prescriptions link to patients through ``patient_id`` only; the
      grouping pass lives in ``group_by_patient``
"""

from collections import defaultdict
from datetime import date
from typing import Iterable, Optional

from pydantic import BaseModel, Field, field_validator

from crud_showcase.domain.enums import Gender


class Patient(BaseModel):
    """Patient demographic record.

    Parameters:
        id: Patient identifier
        name: Full name
        age: Age in years (0-150)
        gender: Gender; common spellings ("m", "Female", ...) are normalised
    """

    id: int = Field(..., description="Patient identifier")
    name: str = Field(..., description="Full name")
    age: int = Field(..., ge=0, le=150, description="Age in years")
    gender: Gender = Field(..., description="Administrative gender")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v_stripped = v.strip()
        if not v_stripped:
            raise ValueError("Name cannot be empty or whitespace only")
        return v_stripped

    @field_validator("gender", mode="before")
    @classmethod
    def validate_gender(cls, v) -> Optional[Gender]:
        """Convert string values to the Gender enum.

        Accepts various string formats and normalizes them; anything
        unrecognised becomes ``Gender.UNKNOWN``.
        """
        if v is None:
            return v
        if isinstance(v, Gender):
            return v

        v_str = str(v).strip().lower()
        mapping = {
            "m": Gender.MALE,
            "male": Gender.MALE,
            "f": Gender.FEMALE,
            "female": Gender.FEMALE,
            "o": Gender.OTHER,
            "other": Gender.OTHER,
            "u": Gender.UNKNOWN,
            "unknown": Gender.UNKNOWN,
        }
        return mapping.get(v_str, Gender.UNKNOWN)

    def __str__(self) -> str:
        return f"ID: {self.id}, Name: {self.name}, Age: {self.age}, Gender: {self.gender.display_name}"


class Prescription(BaseModel):
    """A medication issued to a patient.

    Parameters:
        id: Prescription identifier
        patient_id: ID of the patient it was issued to
        medication_name: Medication and dose (e.g., "Lisinopril 10mg")
        date_issued: Issue date
    """

    id: int = Field(..., description="Prescription identifier")
    patient_id: int = Field(..., description="Owning patient identifier")
    medication_name: str = Field(..., description="Medication and dose")
    date_issued: date = Field(..., description="Date the prescription was issued")

    @field_validator("medication_name")
    @classmethod
    def validate_medication_name(cls, v: str) -> str:
        v_stripped = v.strip()
        if not v_stripped:
            raise ValueError("Medication name cannot be empty or whitespace only")
        return v_stripped

    def __str__(self) -> str:
        return f"ID: {self.id}, Medication: {self.medication_name}, Issued: {self.date_issued:%Y-%m-%d}"


def group_by_patient(prescriptions: Iterable[Prescription]) -> dict[int, list[Prescription]]:
    """Group prescriptions by ``patient_id``, keeping their original order."""
    grouped: dict[int, list[Prescription]] = defaultdict(list)
    for prescription in prescriptions:
        grouped[prescription.patient_id].append(prescription)
    return dict(grouped)
