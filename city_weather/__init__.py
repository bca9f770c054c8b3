"""City weather gateway: geocoding, weather and air-quality lookups by city name."""
