"""Constants for Feature document field names"""


class FeatureFields:
    """Field name constants for GeoJSON Feature documents"""
    TYPE = "type"
    ID = "id"
    PROPERTIES = "properties"
    GEOMETRY = "geometry"
    COORDINATES = "coordinates"
    
    # Nested under "properties"
    DEVICE_ID = "deviceId"
    CAPTION = "caption"
    TAKEN_AT = "takenAt"
    
    # Dotted paths used in MongoDB queries
    PROPERTIES_DEVICE_ID = "properties.deviceId"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class GeoJSONTypes:
    """GeoJSON object type names"""
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"
    POINT = "Point"
    
    MEDIA_TYPE = "application/vnd.geo+json"
