"""
Frequently asked questions shown on the site.
"""
from typing import List, Optional

from stagedoor.schemas import FAQ
from stagedoor.services.base import ResourceService


class FAQService(ResourceService[FAQ]):
    model = FAQ
    read_path = "/api/faq"
    admin_path = "/api/admin/faq"

    def get_all(self, use_cache: Optional[bool] = None, active_only: bool = True) -> List[FAQ]:
        query = "?activeOnly=true" if active_only else "?activeOnly=false"
        return self._parse_list(self.client.get(f"{self.read_path}{query}", use_cache is not False))
