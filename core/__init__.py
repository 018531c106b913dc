# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the HTTP layer:
# - models/: Pydantic schemas for the website form and records
# - services/: website record lifecycle and image storage
#
# Routers stay thin and delegate here.
# =============================================================================
