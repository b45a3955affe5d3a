"""Services Layer — orchestration between routes, core mapping and the upstream client."""
