from .address import Address as Address
from .enrollment_id import EnrollmentId as EnrollmentId
