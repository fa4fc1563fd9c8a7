from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    PaymentRequiredException as PaymentRequiredException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .repository import Repository as Repository
from .value_object import (
    IsoDateTime as IsoDateTime,
)
from .value_object import (
    UserId as UserId,
)
