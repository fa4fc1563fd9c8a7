from .enrollment import Enrollment as Enrollment
