"""Configuration constants for the GeoJSON codec."""

# Decoding
MAX_NESTING_DEPTH = 256

# Encoding (compact, matches the canonical writer output)
JSON_SEPARATORS = (",", ":")
JSON_ALLOW_NAN = False

# Member names
TYPE_PROPERTY = "type"
BBOX_PROPERTY = "bbox"
COORDINATES_PROPERTY = "coordinates"
GEOMETRIES_PROPERTY = "geometries"
GEOMETRY_PROPERTY = "geometry"
FEATURES_PROPERTY = "features"
PROPERTIES_PROPERTY = "properties"
ID_PROPERTY = "id"

# Members each kind owns besides "type" and "bbox"
RESERVED_MEMBERS = {
    "Point": (COORDINATES_PROPERTY,),
    "LineString": (COORDINATES_PROPERTY,),
    "Polygon": (COORDINATES_PROPERTY,),
    "MultiPoint": (COORDINATES_PROPERTY,),
    "MultiLineString": (COORDINATES_PROPERTY,),
    "MultiPolygon": (COORDINATES_PROPERTY,),
    "GeometryCollection": (GEOMETRIES_PROPERTY,),
    "Feature": (ID_PROPERTY, GEOMETRY_PROPERTY, PROPERTIES_PROPERTY),
    "FeatureCollection": (FEATURES_PROPERTY,),
}

# Numeric ladder bounds
INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
UINT32_MAX = 2**32 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1
UINT64_MAX = 2**64 - 1
