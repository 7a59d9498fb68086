# Standard library imports
from dataclasses import dataclass
from typing import Any, Dict, Tuple

# Local application imports
from ..constants import FeatureFields


@dataclass(frozen=True)
class FeatureDocumentSchema:
    """
    Binds the Feature model to its collection and declares which
    document fields never leave the server.
    
    Hidden fields are dotted paths into the stored document
    (e.g. "properties.deviceId").
    """
    collection_name: str = "trackit"
    hidden_fields: Tuple[str, ...] = (FeatureFields.PROPERTIES_DEVICE_ID,)
    
    def is_hidden(self, path: str) -> bool:
        return path in self.hidden_fields
    
    def strip_hidden(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Return a copy of document with every hidden field removed
        
        Args:
            document: Stored or serialized feature document
            
        Returns:
            New dictionary; the input is not modified
        """
        return self._strip(document, prefix="")
    
    def _strip(self, document: Dict[str, Any], prefix: str) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key, value in document.items():
            path = f"{prefix}{key}"
            if self.is_hidden(path):
                continue
            if isinstance(value, dict):
                value = self._strip(value, prefix=f"{path}.")
            result[key] = value
        return result
