"""Fixed constants: epochs, sidereal-time coefficients, cosmology presets, thresholds."""

# Time: seconds per unit
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
MINUTES_PER_DAY = 1440.0
HOURS_PER_DAY = 24.0

# Julian Date epochs
JD_J2000 = 2451545.0  # 2000-01-01 12:00 TT
MJD_OFFSET = 2400000.5  # MJD = JD - MJD_OFFSET
JD_GREGORIAN_REFORM = 2299161  # first Julian Day Number on the Gregorian calendar
JD_CIVIL_OFFSET = 1721013.5  # constant term of the 1901-2099 civil date formula
DAYS_PER_JULIAN_CENTURY = 36525.0

# Tolerance added to the day fraction before time-of-day extraction (about
# twice the float resolution of a JD near 2.46e6, i.e. ~86 microseconds).
JD_FRACTION_EPSILON = 1e-9

# Greenwich sidereal time polynomial (degrees), Meeus eq. 12.4
GST_AT_J2000 = 280.46061837
GST_RATE = 360.98564736629
GST_T2 = 0.000387933
GST_T3_DIVISOR = 38710000.0

# Angle
DEGREES_PER_CIRCLE = 360.0
HALF_CIRCLE_DEGREES = 180.0
ARCMIN_PER_DEGREE = 60.0

# Sunrise equation (degrees, days)
SUN_MEAN_ANOMALY_AT_J2000 = 357.5291
SUN_MEAN_ANOMALY_RATE = 0.98560028
SUN_PERIHELION_LONGITUDE = 102.9372
EARTH_OBLIQUITY = 23.4397
TRANSIT_LEAP_SECONDS = 69.184  # TT - UTC offset applied to the day count
TRANSIT_OFFSET_DAYS = 0.0009
ELEVATION_DIP_COEFFICIENT = 2.076  # arcmin of horizon dip per sqrt(metre)

# Solar altitude thresholds (degrees)
SUNRISE_ALTITUDE = -0.833  # solar disk radius + standard refraction
CIVIL_TWILIGHT_ALTITUDE = -6.0
NAUTICAL_TWILIGHT_ALTITUDE = -12.0
ASTRONOMICAL_TWILIGHT_ALTITUDE = -18.0

# Cosmology
SPEED_OF_LIGHT_KM_S = 299792.458
DEFAULT_INTEGRATION_STEPS = 1000
ANGULAR_DIAMETER_MIN_REDSHIFT = 0.01  # below this d_A is reported as d_L
PARSECS_PER_MEGAPARSEC = 1.0e6
DISTANCE_MODULUS_REFERENCE_PC = 10.0

PLANCK18_H0 = 67.66
PLANCK18_OMEGA_M = 0.3103
PLANCK18_OMEGA_LAMBDA = 0.6897

# Airmass grid: empirical altitude term subtracted before the airmass formula.
# The tangent is taken of (90 - alt) as a plain number, not degrees.
AIRMASS_ALTITUDE_TERM = 0.0347

# Photometry
DEFAULT_ZERO_POINT = 23.9  # AB magnitude zero point for microJansky fluxes
DEFAULT_LIMMAG_SIGMA = 5.0

# Equatorial (J2000) -> galactic rotation matrix
EQUATORIAL_TO_GALACTIC: tuple[tuple[float, float, float], ...] = (
    (-0.054875539, -0.873437105, -0.483834992),
    (0.494109454, -0.444829594, 0.746982249),
    (-0.867666136, -0.198076390, 0.455983795),
)
