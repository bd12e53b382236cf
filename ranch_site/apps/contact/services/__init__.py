"""
Contact services module
"""
from ranch_site.apps.contact.services.contact_service import contact_service, get_contact_service

__all__ = ['contact_service', 'get_contact_service']
