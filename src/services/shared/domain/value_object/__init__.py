from .iso_date_time import IsoDateTime as IsoDateTime
from .user_id import UserId as UserId
