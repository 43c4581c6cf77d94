# clinic_domain/models/all_models.py
from clinic_domain.models.department import Department
from clinic_domain.models.clinic import Clinic
from clinic_domain.models.patient import Gender, Patient
from clinic_domain.models.doctor import Doctor
from clinic_domain.models.service import DoctorService, Service
from clinic_domain.models.room import Room
from clinic_domain.models.appointment import Appointment, AppointmentStatus
from clinic_domain.models.prescription import Prescription
from clinic_domain.models.medical_record import MedicalRecord
from clinic_domain.models.payment import Payment, PaymentMethod, PaymentStatus
