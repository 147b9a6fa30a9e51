"""Request dependencies shared by API routers."""
