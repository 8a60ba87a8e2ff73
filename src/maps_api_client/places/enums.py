"""Restricted vocabularies for places requests."""

from __future__ import annotations

from enum import Enum

from ..geocoding.enums import Component


class RankBy(str, Enum):
    PROMINENCE = "prominence"
    DISTANCE = "distance"


class PriceLevel(str, Enum):
    FREE = "0"
    INEXPENSIVE = "1"
    MODERATE = "2"
    EXPENSIVE = "3"
    VERY_EXPENSIVE = "4"


class PlaceType(str, Enum):
    ACCOUNTING = "accounting"
    AIRPORT = "airport"
    AMUSEMENT_PARK = "amusement_park"
    AQUARIUM = "aquarium"
    ART_GALLERY = "art_gallery"
    ATM = "atm"
    BAKERY = "bakery"
    BANK = "bank"
    BAR = "bar"
    BEAUTY_SALON = "beauty_salon"
    BICYCLE_STORE = "bicycle_store"
    BOOK_STORE = "book_store"
    BOWLING_ALLEY = "bowling_alley"
    BUS_STATION = "bus_station"
    CAFE = "cafe"
    CAMPGROUND = "campground"
    CAR_DEALER = "car_dealer"
    CAR_RENTAL = "car_rental"
    CAR_REPAIR = "car_repair"
    CAR_WASH = "car_wash"
    CASINO = "casino"
    CEMETERY = "cemetery"
    CHURCH = "church"
    CITY_HALL = "city_hall"
    CLOTHING_STORE = "clothing_store"
    CONVENIENCE_STORE = "convenience_store"
    COURTHOUSE = "courthouse"
    DENTIST = "dentist"
    DEPARTMENT_STORE = "department_store"
    DOCTOR = "doctor"
    DRUGSTORE = "drugstore"
    ELECTRICIAN = "electrician"
    ELECTRONICS_STORE = "electronics_store"
    EMBASSY = "embassy"
    FIRE_STATION = "fire_station"
    FLORIST = "florist"
    FUNERAL_HOME = "funeral_home"
    FURNITURE_STORE = "furniture_store"
    GAS_STATION = "gas_station"
    GYM = "gym"
    HAIR_CARE = "hair_care"
    HARDWARE_STORE = "hardware_store"
    HINDU_TEMPLE = "hindu_temple"
    HOME_GOODS_STORE = "home_goods_store"
    HOSPITAL = "hospital"
    INSURANCE_AGENCY = "insurance_agency"
    JEWELRY_STORE = "jewelry_store"
    LAUNDRY = "laundry"
    LAWYER = "lawyer"
    LIBRARY = "library"
    LIGHT_RAIL_STATION = "light_rail_station"
    LIQUOR_STORE = "liquor_store"
    LOCAL_GOVERNMENT_OFFICE = "local_government_office"
    LOCKSMITH = "locksmith"
    LODGING = "lodging"
    MEAL_DELIVERY = "meal_delivery"
    MEAL_TAKEAWAY = "meal_takeaway"
    MOSQUE = "mosque"
    MOVIE_RENTAL = "movie_rental"
    MOVIE_THEATER = "movie_theater"
    MOVING_COMPANY = "moving_company"
    MUSEUM = "museum"
    NIGHT_CLUB = "night_club"
    PAINTER = "painter"
    PARK = "park"
    PARKING = "parking"
    PET_STORE = "pet_store"
    PHARMACY = "pharmacy"
    PHYSIOTHERAPIST = "physiotherapist"
    PLUMBER = "plumber"
    POLICE = "police"
    POST_OFFICE = "post_office"
    PRIMARY_SCHOOL = "primary_school"
    REAL_ESTATE_AGENCY = "real_estate_agency"
    RESTAURANT = "restaurant"
    ROOFING_CONTRACTOR = "roofing_contractor"
    RV_PARK = "rv_park"
    SCHOOL = "school"
    SECONDARY_SCHOOL = "secondary_school"
    SHOE_STORE = "shoe_store"
    SHOPPING_MALL = "shopping_mall"
    SPA = "spa"
    STADIUM = "stadium"
    STORAGE = "storage"
    STORE = "store"
    SUBWAY_STATION = "subway_station"
    SUPERMARKET = "supermarket"
    SYNAGOGUE = "synagogue"
    TAXI_STAND = "taxi_stand"
    TOURIST_ATTRACTION = "tourist_attraction"
    TRAIN_STATION = "train_station"
    TRANSIT_STATION = "transit_station"
    TRAVEL_AGENCY = "travel_agency"
    UNIVERSITY = "university"
    VETERINARY_CARE = "veterinary_care"
    ZOO = "zoo"


class AutocompletePlaceType(str, Enum):
    GEOCODE = "geocode"
    ADDRESS = "address"
    ESTABLISHMENT = "establishment"
    REGIONS = "(regions)"
    CITIES = "(cities)"


class PlaceDetailsFieldMask(str, Enum):
    ADDRESS_COMPONENT = "address_component"
    ADR_ADDRESS = "adr_address"
    BUSINESS_STATUS = "business_status"
    FORMATTED_ADDRESS = "formatted_address"
    FORMATTED_PHONE_NUMBER = "formatted_phone_number"
    GEOMETRY = "geometry"
    GEOMETRY_LOCATION = "geometry/location"
    GEOMETRY_LOCATION_LAT = "geometry/location/lat"
    GEOMETRY_LOCATION_LNG = "geometry/location/lng"
    GEOMETRY_VIEWPORT = "geometry/viewport"
    GEOMETRY_VIEWPORT_NORTHEAST = "geometry/viewport/northeast"
    GEOMETRY_VIEWPORT_SOUTHWEST = "geometry/viewport/southwest"
    ICON = "icon"
    INTERNATIONAL_PHONE_NUMBER = "international_phone_number"
    NAME = "name"
    OPENING_HOURS = "opening_hours"
    PERMANENTLY_CLOSED = "permanently_closed"
    PHOTOS = "photos"
    PLACE_ID = "place_id"
    PLUS_CODE = "plus_code"
    PRICE_LEVEL = "price_level"
    RATING = "rating"
    REVIEWS = "reviews"
    TYPES = "types"
    URL = "url"
    USER_RATINGS_TOTAL = "user_ratings_total"
    UTC_OFFSET = "utc_offset"
    VICINITY = "vicinity"
    WEBSITE = "website"


class PlaceSearchFieldMask(str, Enum):
    BUSINESS_STATUS = "business_status"
    FORMATTED_ADDRESS = "formatted_address"
    GEOMETRY = "geometry"
    GEOMETRY_LOCATION = "geometry/location"
    GEOMETRY_LOCATION_LAT = "geometry/location/lat"
    GEOMETRY_LOCATION_LNG = "geometry/location/lng"
    GEOMETRY_VIEWPORT = "geometry/viewport"
    GEOMETRY_VIEWPORT_NORTHEAST = "geometry/viewport/northeast"
    GEOMETRY_VIEWPORT_SOUTHWEST = "geometry/viewport/southwest"
    ICON = "icon"
    NAME = "name"
    OPENING_HOURS = "opening_hours"
    OPENING_HOURS_OPEN_NOW = "opening_hours/open_now"
    PERMANENTLY_CLOSED = "permanently_closed"
    PHOTOS = "photos"
    PLACE_ID = "place_id"
    PLUS_CODE = "plus_code"
    PRICE_LEVEL = "price_level"
    RATING = "rating"
    TYPES = "types"
    USER_RATINGS_TOTAL = "user_ratings_total"


class InputType(str, Enum):
    TEXT_QUERY = "textquery"
    PHONE_NUMBER = "phonenumber"


class LocationBias(str, Enum):
    IP = "ipbias"
    POINT = "point"
    CIRCLE = "circle"
    RECTANGLE = "rectangle"


__all__ = [
    "RankBy",
    "PriceLevel",
    "PlaceType",
    "AutocompletePlaceType",
    "Component",
    "PlaceDetailsFieldMask",
    "PlaceSearchFieldMask",
    "InputType",
    "LocationBias",
]
