"""Import fixtures from scout_authz.testing for test discovery."""

from scout_authz.testing._fixtures import authz_actors, authz_table, isolated_authz_state

__all__ = ["authz_actors", "authz_table", "isolated_authz_state"]
