"""
Performances and testimonials shown on the public site.
"""
from typing import List

from stagedoor.schemas import Performance, Testimonial
from stagedoor.services.base import ResourceService


class PerformanceService(ResourceService[Performance]):
    model = Performance
    read_path = "/api/performances"
    admin_path = "/api/admin/performances"

    def get_upcoming(self, use_cache: bool = True) -> List[Performance]:
        """Performances dated today or later, soonest first."""
        return self._parse_list(self.client.get(f"{self.read_path}/upcoming", use_cache))


class TestimonialService(ResourceService[Testimonial]):
    model = Testimonial
    read_path = "/api/testimonials"
    admin_path = "/api/admin/testimonials"
