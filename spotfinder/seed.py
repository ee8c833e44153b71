"""Default catalog loaded into a freshly created locations table."""
import random

# Greater Toronto Area localities: (name, latitude, longitude)
GTA_LOCATIONS = [
    ("Toronto", 43.6510, -79.3470),
    ("Scarborough", 43.7731, -79.2578),
    ("Oshawa", 43.8971, -78.8658),
    ("Whitby", 43.8975, -78.9429),
    ("Ajax", 43.8509, -79.0204),
    ("Pickering", 43.8384, -79.0868),
    ("Mississauga", 43.5890, -79.6441),
    ("Brampton", 43.7315, -79.7624),
    ("Vaughan", 43.8363, -79.4985),
    ("Markham", 43.8561, -79.3370),
    ("Richmond Hill", 43.8828, -79.4403),
    ("North York", 43.7615, -79.4111),
    ("Etobicoke", 43.6435, -79.5650),
    ("York", 43.6896, -79.4875),
    ("Thornhill", 43.8130, -79.4205),
    ("Maple", 43.8534, -79.5071),
    ("Woodbridge", 43.7875, -79.6077),
    ("Concord", 43.8012, -79.4982),
    ("King City", 43.9248, -79.5287),
    ("Aurora", 44.0065, -79.4504),
    ("Newmarket", 44.0592, -79.4613),
    ("Bradford", 44.1146, -79.5590),
    ("Stouffville", 43.9707, -79.2442),
    ("Uxbridge", 44.1092, -79.1205),
    ("Brooklin", 43.9635, -78.9576),
    ("Port Perry", 44.1001, -78.9442),
    ("Clarington", 43.9356, -78.6074),
    ("Bowmanville", 43.9126, -78.6870),
    ("Courtice", 43.9112, -78.7975),
    ("Newcastle", 43.9237, -78.5944),
    ("Georgina", 44.2964, -79.4274),
    ("Keswick", 44.2230, -79.4596),
    ("Sutton", 44.3045, -79.3633),
    ("Pefferlaw", 44.3153, -79.2029),
    ("Mount Albert", 44.1363, -79.3148),
    ("Ballantrae", 43.9768, -79.3184),
    ("Unionville", 43.8622, -79.3104),
    ("Cornell", 43.8665, -79.2277),
    ("Box Grove", 43.8537, -79.2191),
    ("Milliken", 43.8253, -79.3009),
    ("Buttonville", 43.8592, -79.3720),
    ("Cathedraltown", 43.8693, -79.3676),
    ("Bayview Glen", 43.8333, -79.3765),
    ("Cachet", 43.8772, -79.3496),
    ("Victoria Square", 43.8903, -79.3677),
    ("Berczy Village", 43.8961, -79.3064),
    ("Greensborough", 43.9112, -79.2566),
    ("Rouge Park", 43.8103, -79.1329),
    ("Guildwood", 43.7553, -79.1968),
    ("West Hill", 43.7678, -79.1771),
    ("Port Union", 43.7852, -79.1320),
    ("Highland Creek", 43.7873, -79.1845),
    ("Morningside", 43.7993, -79.2156),
    ("Woburn", 43.7701, -79.2318),
    ("Malvern", 43.8067, -79.2297),
    ("Agincourt", 43.7879, -79.2676),
    ("Milliken Mills", 43.8315, -79.3168),
    ("Middlefield", 43.8361, -79.2701),
    ("Cedarwood", 43.8383, -79.2586),
    ("Armour Heights", 43.7371, -79.4267),
    ("Bathurst Manor", 43.7544, -79.4564),
    ("Bayview Village", 43.7697, -79.3750),
    ("Clanton Park", 43.7490, -79.4395),
    ("Don Valley Village", 43.7807, -79.3494),
    ("Downsview", 43.7436, -79.4905),
    ("Glen Park", 43.7066, -79.4537),
    ("Humber Summit", 43.7667, -79.5622),
    ("Jane and Finch", 43.7610, -79.4961),
    ("Kingsview Village", 43.7030, -79.5546),
    ("Rexdale", 43.7277, -79.5563),
    ("Smithfield", 43.7481, -79.5937),
    ("The Elms", 43.7168, -79.5351),
    ("West Humber", 43.7261, -79.5924),
    ("Woodbine Gardens", 43.7045, -79.3095),
    ("The Beaches", 43.6764, -79.2933),
    ("Riverdale", 43.6667, -79.3477),
    ("East York", 43.7045, -79.3275),
    ("Leaside", 43.7095, -79.3631),
    ("Rosedale", 43.6780, -79.3802),
    ("Yorkville", 43.6708, -79.3948),
    ("Annex", 43.6697, -79.4075),
    ("Forest Hill", 43.6972, -79.4145),
    ("Deer Park", 43.6900, -79.3960),
    ("Casa Loma", 43.6785, -79.4095),
    ("Summerhill", 43.6826, -79.3912),
    ("Kensington Market", 43.6548, -79.4023),
    ("Little Italy", 43.6541, -79.4195),
    ("Chinatown", 43.6528, -79.3984),
    ("Harbourfront", 43.6387, -79.3825),
    ("Liberty Village", 43.6396, -79.4225),
    ("Parkdale", 43.6415, -79.4308),
    ("Swansea", 43.6505, -79.4755),
    ("Nobleton", 43.9337, -79.6528),
    ("Pelmo Park", 43.7050, -79.5156),
    ("O'Connor-Parkview", 43.7051, -79.3151),
    ("Davisville", 43.7047, -79.3834),
    ("Chaplin Estates", 43.7024, -79.4095),
    ("Moore Park", 43.6908, -79.3772),
    ("Caledon", 43.86, -79.86),
    ("Halton Hills", 43.64, -79.94),
]

# Fixed names used to exercise update and delete paths deterministically
RESERVED_LOCATIONS = [
    ("TestTown1", 43.999, -79.111),
    ("DeleteMeSpot", 43.666, -79.444),
    ("UpdateMeCity", 43.555, -79.555),
]


def seed_rows(rng=None):
    """Rows in insertion order: the catalog shuffled, then the reserved records."""
    rows = list(GTA_LOCATIONS)
    (rng or random).shuffle(rows)
    return rows + RESERVED_LOCATIONS
