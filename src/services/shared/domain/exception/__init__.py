from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import (
    DomainException as DomainException,
)
from .exceptions import (
    PaymentRequiredException as PaymentRequiredException,
)
from .exceptions import (
    ResourceNotFoundException as ResourceNotFoundException,
)
