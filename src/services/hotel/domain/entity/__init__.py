from .hotel import Hotel as Hotel
from .room import Room as Room
