from abc import ABC, abstractmethod
from typing import List

from routes_c.models.directions import PathAlternative, TravelMode
from routes_c.models.route import Coordinate


class DirectionsGateway(ABC):
    """Point-to-point directions provider interface"""

    @abstractmethod
    async def route(
        self,
        origin: Coordinate,
        destination: Coordinate,
        mode: TravelMode = TravelMode.WALKING,
        want_alternates: bool = True,
    ) -> List[PathAlternative]:
        """Get candidate paths between two points

        Raises:
            NoPathError: No path exists for this pair
            RateLimitError: The provider is overloaded or the quota is spent
            DirectionsError: Any other provider failure
        """
        pass
