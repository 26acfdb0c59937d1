from abc import ABC, abstractmethod

from blog_globals.core.models.site_identity import SiteIdentity


class SiteInfoPort(ABC):
    @abstractmethod
    def get_site_identity(self) -> SiteIdentity:
        """Return the site identity used to fill the renderer's global data."""
        pass
