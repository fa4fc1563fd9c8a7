from .entity import Enrollment as Enrollment
from .repository import EnrollmentRepository as EnrollmentRepository
from .value_object import Address as Address
from .value_object import EnrollmentId as EnrollmentId
