def listing_ids(response, key='listings'):
    return [listing['id'] for listing in response.get_json()[key]]


VALID_LISTING = {
    'title': 'Spacious 3BHK near the lake',
    'description': 'Corner unit with two balconies',
    'price': 5000000,
    'listingType': 'SELL',
    'propertyType': 'APARTMENT',
    'bedrooms': 3,
    'bathrooms': 2,
    'areaSqFt': 1450,
    'address': '221 Lake View Road',
    'city': 'Pune',
    'state': 'Maharashtra',
    'amenities': ['Parking', 'Lift'],
}
