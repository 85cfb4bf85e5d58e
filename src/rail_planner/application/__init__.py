"""Application layer - itinerary search and booking use cases."""
