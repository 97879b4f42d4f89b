"""Window host and step timing."""
