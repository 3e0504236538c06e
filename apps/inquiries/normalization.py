"""
Mapping from validated public-form data to Inquiry model fields.

Form fields use the website's vocabulary (camelCase names, a three-way
dietary toggle); the stored record uses the collection's own field names and
enum values.
"""

from typing import Any, Dict, Optional

DIETARY_TO_MENU_PREFERENCE = {
    'veg': 'veg-only',
    'nonveg': 'nonveg-only',
    'both': 'both',
}


def map_dietary_preference(preference: Optional[str]) -> str:
    """Map the form's dietary toggle to a menu preference; unknown values are 'not-decided'."""
    if not isinstance(preference, str):
        return 'not-decided'
    return DIETARY_TO_MENU_PREFERENCE.get(preference, 'not-decided')


def to_record(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build Inquiry field values from a validated contact or quote submission.

    Args:
        data: ``validated_data`` of a contact or quote submission serializer

    Returns:
        Keyword arguments for ``Inquiry`` creation
    """
    record = {
        'inquiry_type': data['type'],
        'name': data['name'],
        'email': data['email'],
        'phone': data['phone'],
        'message': data.get('message') or '',
        'source': 'website',
        'status': 'new',
    }

    if data['type'] == 'contact':
        record['event_type'] = data.get('eventType') or 'other'
        return record

    record.update({
        'event_type': data['eventType'],
        'event_date': data['eventDate'],
        'guest_count': data['guestCount'],
        'venue': data.get('venue', ''),
        'alternate_phone': data.get('alternatePhone', ''),
        'menu_preference': map_dietary_preference(data.get('dietaryPreference')),
        'cuisine_preference': data.get('cuisinePreference', ''),
        'spice_level': data.get('spiceLevel', ''),
        'special_requirements': data.get('specialRequirements', ''),
        'services': list(data.get('services', [])),
        'budget': data.get('budget', ''),
    })
    return record
