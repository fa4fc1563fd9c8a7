from .http_response import api_response as api_response
from .http_response import domain_error_response as domain_error_response
from .request_context import get_user_id as get_user_id
