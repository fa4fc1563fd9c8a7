from .entity import Hotel as Hotel
from .entity import Room as Room
from .repository import HotelRepository as HotelRepository
from .value_object import HotelId as HotelId
from .value_object import HotelName as HotelName
