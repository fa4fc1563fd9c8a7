from .enrollment_repository import EnrollmentRepository as EnrollmentRepository
