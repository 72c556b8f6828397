# src/hotelpulse/adapters/directory_data.py
"""
Built-in property directory: Phoenix-area hotels by GDS property code.

Loaded once at import; PropertyDirectory wraps it in frozen records.
"""
from __future__ import annotations

from typing import Any

ARIZONA_HOTELS: list[dict[str, Any]] = [
    {
        "identifier": "SCF0001PH",
        "name": "The Phoenician",
        "address": "6000 E Camelback Rd, Scottsdale, AZ 85251",
        "city": "Scottsdale",
        "chain_code": "PH",
        "chain_name": "Luxury Collection",
        "tier": "PREMIUM",
        "monetization_status": "ALREADY_EARNING",
        "monthly_revenue": 87433,
        "monthly_potential": 0,
        "competitor_identifiers": ["SCF0002FS", "SCF0003FM", "SCF0004OM"],
        "missed_bookings": 0,
        "seed_complaints": []
    },
    {
        "identifier": "SCF0002FS",
        "name": "Four Seasons Resort Scottsdale",
        "address": "10600 E Crescent Moon Dr, Scottsdale, AZ 85262",
        "city": "Scottsdale",
        "chain_code": "FS",
        "chain_name": "Four Seasons",
        "tier": "PREMIUM",
        "monetization_status": "ALREADY_EARNING",
        "monthly_revenue": 92847,
        "monthly_potential": 0,
        "competitor_identifiers": ["SCF0001PH", "SCF0003FM", "SCF0005AD"],
        "missed_bookings": 0,
        "seed_complaints": []
    },
    {
        "identifier": "SCF0003FM",
        "name": "Fairmont Scottsdale Princess",
        "address": "7575 E Princess Dr, Scottsdale, AZ 85255",
        "city": "Scottsdale",
        "chain_code": "FM",
        "chain_name": "Fairmont",
        "tier": "PREMIUM",
        "monetization_status": "ALREADY_EARNING",
        "monthly_revenue": 78234,
        "monthly_potential": 0,
        "competitor_identifiers": ["SCF0001PH", "SCF0002FS", "SCF0004OM"],
        "missed_bookings": 0,
        "seed_complaints": []
    },
    {
        "identifier": "SCF0004OM",
        "name": "Omni Scottsdale Resort & Spa",
        "address": "4949 E Lincoln Dr, Scottsdale, AZ 85253",
        "city": "Scottsdale",
        "chain_code": "OM",
        "chain_name": "Omni Hotels",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 67433,
        "competitor_identifiers": ["SCF0001PH", "SCF0002FS", "SCF0003FM"],
        "missed_bookings": 847,
        "seed_complaints": [
            "Four Seasons offers instant rides but Omni doesn't",
            "Had to wait 45 minutes for Uber surge pricing",
            "Why doesn't Omni have the instant ride feature?",
            "Fairmont picked us up in a Tesla, very disappointed"
        ],
    },
    {
        "identifier": "SCF0005AD",
        "name": "ADERO Scottsdale Resort",
        "address": "13225 N Eagle Ridge Dr, Scottsdale, AZ 85268",
        "city": "Scottsdale",
        "chain_code": "AD",
        "chain_name": "Autograph Collection",
        "tier": "PREMIUM",
        "monetization_status": "ALREADY_EARNING",
        "monthly_revenue": 56789,
        "monthly_potential": 0,
        "competitor_identifiers": ["SCF0002FS", "SCF0006AZ", "SCF0007SR"],
        "missed_bookings": 0,
        "seed_complaints": []
    },
    {
        "identifier": "SCF0006AZ",
        "name": "Andaz Scottsdale Resort & Bungalows",
        "address": "6114 N Scottsdale Rd, Paradise Valley, AZ 85253",
        "city": "Paradise Valley",
        "chain_code": "AZ",
        "chain_name": "Andaz",
        "tier": "PREMIUM",
        "monetization_status": "ALREADY_EARNING",
        "monthly_revenue": 63421,
        "monthly_potential": 0,
        "competitor_identifiers": ["SCF0005AD", "SCF0007SR", "SCF0008MS"],
        "missed_bookings": 0,
        "seed_complaints": []
    },
    {
        "identifier": "SCF0007SR",
        "name": "The Scottsdale Resort & Spa",
        "address": "7700 E McCormick Pkwy, Scottsdale, AZ 85258",
        "city": "Scottsdale",
        "chain_code": "SR",
        "chain_name": "Curio Collection",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 45678,
        "competitor_identifiers": ["SCF0005AD", "SCF0006AZ", "SCF0009WK"],
        "missed_bookings": 567,
        "seed_complaints": [
            "Other resorts have instant luxury rides",
            "Spent $150 on surge pricing to airport",
            "Disappointed no Tesla service like Four Seasons"
        ],
    },
    {
        "identifier": "SCF0008MS",
        "name": "Mountain Shadows Resort",
        "address": "5445 E Lincoln Dr, Paradise Valley, AZ 85253",
        "city": "Paradise Valley",
        "chain_code": "MS",
        "chain_name": "Independent",
        "tier": "PREMIUM",
        "monetization_status": "ALREADY_EARNING",
        "monthly_revenue": 51234,
        "monthly_potential": 0,
        "competitor_identifiers": ["SCF0006AZ", "SCF0009WK", "SCF0010JW"],
        "missed_bookings": 0,
        "seed_complaints": []
    },
    {
        "identifier": "SCF0009WK",
        "name": "The Westin Kierland Resort & Spa",
        "address": "6902 E Greenway Pkwy, Scottsdale, AZ 85254",
        "city": "Scottsdale",
        "chain_code": "WI",
        "chain_name": "Westin",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 58901,
        "competitor_identifiers": ["SCF0007SR", "SCF0008MS", "SCF0010JW"],
        "missed_bookings": 723,
        "seed_complaints": [
            "No instant ride option available",
            "Had to use expensive Uber during surge"
        ],
    },
    {
        "identifier": "SCF0010JW",
        "name": "JW Marriott Scottsdale Camelback Inn",
        "address": "5402 E Lincoln Dr, Scottsdale, AZ 85253",
        "city": "Scottsdale",
        "chain_code": "JW",
        "chain_name": "JW Marriott",
        "tier": "PREMIUM",
        "monetization_status": "ALREADY_EARNING",
        "monthly_revenue": 71234,
        "monthly_potential": 0,
        "competitor_identifiers": ["SCF0008MS", "SCF0009WK", "SCF0011SC"],
        "missed_bookings": 0,
        "seed_complaints": []
    },
    {
        "identifier": "SCF0011SC",
        "name": "Sanctuary Camelback Mountain Resort",
        "address": "5700 E McDonald Dr, Paradise Valley, AZ 85253",
        "city": "Paradise Valley",
        "chain_code": "SC",
        "chain_name": "Sanctuary",
        "tier": "PREMIUM",
        "monetization_status": "ALREADY_EARNING",
        "monthly_revenue": 83456,
        "monthly_potential": 0,
        "competitor_identifiers": ["SCF0010JW", "PHX0001AB", "PHX0002RP"],
        "missed_bookings": 0,
        "seed_complaints": []
    },
    {
        "identifier": "PHX0001AB",
        "name": "Arizona Biltmore",
        "address": "2400 E Missouri Ave, Phoenix, AZ 85016",
        "city": "Phoenix",
        "chain_code": "WA",
        "chain_name": "Waldorf Astoria",
        "tier": "PREMIUM",
        "monetization_status": "ALREADY_EARNING",
        "monthly_revenue": 95678,
        "monthly_potential": 0,
        "competitor_identifiers": ["SCF0011SC", "PHX0002RP", "PHX0003JW"],
        "missed_bookings": 0,
        "seed_complaints": []
    },
    {
        "identifier": "PHX0002RP",
        "name": "Royal Palms Resort and Spa",
        "address": "5200 E Camelback Rd, Phoenix, AZ 85018",
        "city": "Phoenix",
        "chain_code": "RP",
        "chain_name": "Hyatt",
        "tier": "PREMIUM",
        "monetization_status": "ALREADY_EARNING",
        "monthly_revenue": 68901,
        "monthly_potential": 0,
        "competitor_identifiers": ["PHX0001AB", "PHX0003JW", "PHX0004CM"],
        "missed_bookings": 0,
        "seed_complaints": []
    },
    {
        "identifier": "PHX0003JW",
        "name": "JW Marriott Phoenix Desert Ridge",
        "address": "5350 E Marriott Dr, Phoenix, AZ 85054",
        "city": "Phoenix",
        "chain_code": "JW",
        "chain_name": "JW Marriott",
        "tier": "PREMIUM",
        "monetization_status": "ALREADY_EARNING",
        "monthly_revenue": 76543,
        "monthly_potential": 0,
        "competitor_identifiers": ["PHX0001AB", "PHX0002RP", "PHX0004CM"],
        "missed_bookings": 0,
        "seed_complaints": []
    },
    {
        "identifier": "PHX0004CM",
        "name": "The Camby, Autograph Collection",
        "address": "2401 E Camelback Rd, Phoenix, AZ 85016",
        "city": "Phoenix",
        "chain_code": "CM",
        "chain_name": "Autograph Collection",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 41234,
        "competitor_identifiers": ["PHX0001AB", "PHX0002RP", "PHX0003JW"],
        "missed_bookings": 512,
        "seed_complaints": [
            "No instant ride service available",
            "Other luxury hotels offer Tesla pickups"
        ],
    },
    {
        "identifier": "PHX0005HR",
        "name": "Hyatt Regency Phoenix",
        "address": "122 N 2nd St, Phoenix, AZ 85004",
        "city": "Phoenix",
        "chain_code": "HY",
        "chain_name": "Hyatt",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 52345,
        "competitor_identifiers": ["PHX0006WP", "PHX0007KP", "PHX0008SP"],
        "missed_bookings": 634,
        "seed_complaints": [
            "Convention attendees complaining about surge pricing",
            "Lost group booking to Westin with instant rides",
            "Business travelers prefer hotels with guaranteed pricing"
        ],
    },
    {
        "identifier": "PHX0006WP",
        "name": "The Westin Phoenix Downtown",
        "address": "333 N Central Ave, Phoenix, AZ 85004",
        "city": "Phoenix",
        "chain_code": "WI",
        "chain_name": "Westin",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 48765,
        "competitor_identifiers": ["PHX0005HR", "PHX0007KP", "PHX0008SP"],
        "missed_bookings": 589,
        "seed_complaints": [
            "Guests asking why we don't have instant rides",
            "Lost corporate contract to competitor with ride service"
        ],
    },
    {
        "identifier": "PHX0007KP",
        "name": "Kimpton Hotel Palomar Phoenix",
        "address": "2 E Jefferson St, Phoenix, AZ 85004",
        "city": "Phoenix",
        "chain_code": "KI",
        "chain_name": "Kimpton",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 43210,
        "competitor_identifiers": ["PHX0005HR", "PHX0006WP", "PHX0008SP"],
        "missed_bookings": 498,
        "seed_complaints": [
            "Other downtown hotels offer ride services",
            "Paid triple for Uber during Suns game"
        ],
    },
    {
        "identifier": "PHX0008SP",
        "name": "Sheraton Phoenix Downtown",
        "address": "340 N 3rd St, Phoenix, AZ 85004",
        "city": "Phoenix",
        "chain_code": "SI",
        "chain_name": "Sheraton",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 55432,
        "competitor_identifiers": ["PHX0005HR", "PHX0006WP", "PHX0007KP"],
        "missed_bookings": 701,
        "seed_complaints": [
            "Convention groups choosing hotels with transportation",
            "Airport surge pricing complaints daily"
        ],
    },
    {
        "identifier": "PHX0009RP",
        "name": "Renaissance Phoenix Downtown Hotel",
        "address": "100 N 1st St, Phoenix, AZ 85004",
        "city": "Phoenix",
        "chain_code": "BR",
        "chain_name": "Renaissance",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 39876,
        "competitor_identifiers": ["PHX0008SP", "PHX0010HG", "PHX0011AC"],
        "missed_bookings": 456,
        "seed_complaints": [
            "Guests frustrated with transportation costs"
        ],
    },
    {
        "identifier": "PHX0010HG",
        "name": "Hilton Garden Inn Phoenix Downtown",
        "address": "15 E Monroe St, Phoenix, AZ 85004",
        "city": "Phoenix",
        "chain_code": "GI",
        "chain_name": "Hilton Garden Inn",
        "tier": "BASIC",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 28765,
        "competitor_identifiers": ["PHX0009RP", "PHX0011AC", "PHX0012HI"],
        "missed_bookings": 345,
        "seed_complaints": [
            "Budget travelers still need affordable rides"
        ],
    },
    {
        "identifier": "PHX0011AC",
        "name": "AC Hotel Phoenix Downtown",
        "address": "414 S 3rd St, Phoenix, AZ 85004",
        "city": "Phoenix",
        "chain_code": "AC",
        "chain_name": "AC Hotels",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 31234,
        "competitor_identifiers": ["PHX0009RP", "PHX0010HG", "PHX0012HI"],
        "missed_bookings": 389,
        "seed_complaints": []
    },
    {
        "identifier": "PHX0012HI",
        "name": "Hampton Inn & Suites Phoenix Downtown",
        "address": "151 E Washington St, Phoenix, AZ 85004",
        "city": "Phoenix",
        "chain_code": "HX",
        "chain_name": "Hampton Inn",
        "tier": "BASIC",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 24567,
        "competitor_identifiers": ["PHX0010HG", "PHX0011AC", "PHX0013HP"],
        "missed_bookings": 298,
        "seed_complaints": []
    },
    {
        "identifier": "PHX0013HP",
        "name": "Hyatt Place Phoenix/Downtown",
        "address": "150 W Adams St, Phoenix, AZ 85003",
        "city": "Phoenix",
        "chain_code": "PH",
        "chain_name": "Hyatt Place",
        "tier": "BASIC",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 26789,
        "competitor_identifiers": ["PHX0012HI", "PHX0014SS", "PHX0015RI"],
        "missed_bookings": 312,
        "seed_complaints": []
    },
    {
        "identifier": "TMP0001OM",
        "name": "Omni Tempe Hotel at ASU",
        "address": "7 East University Dr, Tempe, AZ 85281",
        "city": "Tempe",
        "chain_code": "OM",
        "chain_name": "Omni Hotels",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 61234,
        "competitor_identifiers": ["TMP0002TM", "TMP0003GT", "TMP0004WT"],
        "missed_bookings": 756,
        "seed_complaints": [
            "Parents weekend - families need rides to campus",
            "ASU games create surge pricing nightmares",
            "Mill Avenue visitors stuck with high Uber costs"
        ],
    },
    {
        "identifier": "TMP0002TM",
        "name": "Tempe Mission Palms",
        "address": "60 E 5th St, Tempe, AZ 85281",
        "city": "Tempe",
        "chain_code": "TM",
        "chain_name": "Destination Hotels",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 54321,
        "competitor_identifiers": ["TMP0001OM", "TMP0003GT", "TMP0004WT"],
        "missed_bookings": 623,
        "seed_complaints": [
            "Graduation weekend surge pricing was insane",
            "Business travelers avoiding us for hotels with rides"
        ],
    },
    {
        "identifier": "TMP0003GT",
        "name": "Graduate Tempe",
        "address": "225 E Apache Blvd, Tempe, AZ 85281",
        "city": "Tempe",
        "chain_code": "GT",
        "chain_name": "Graduate Hotels",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 43210,
        "competitor_identifiers": ["TMP0001OM", "TMP0002TM", "TMP0004WT"],
        "missed_bookings": 512,
        "seed_complaints": [
            "Parents asking about airport transportation",
            "Game day transportation is a nightmare"
        ],
    },
    {
        "identifier": "TMP0004WT",
        "name": "The Westin Tempe",
        "address": "11 E 7th Street, Tempe, AZ 85281",
        "city": "Tempe",
        "chain_code": "WI",
        "chain_name": "Westin",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 57890,
        "competitor_identifiers": ["TMP0001OM", "TMP0002TM", "TMP0003GT"],
        "missed_bookings": 689,
        "seed_complaints": [
            "Corporate groups choosing hotels with guaranteed rides"
        ],
    },
    {
        "identifier": "TMP0005AC",
        "name": "AC Hotel Phoenix Tempe/Downtown",
        "address": "100 E Rio Salado Pkwy, Tempe, AZ 85281",
        "city": "Tempe",
        "chain_code": "AC",
        "chain_name": "AC Hotels",
        "tier": "BASIC",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 32145,
        "competitor_identifiers": ["TMP0004WT", "TMP0006CB", "TMP0007DT"],
        "missed_bookings": 398,
        "seed_complaints": []
    },
    {
        "identifier": "TMP0006CB",
        "name": "Canopy by Hilton Tempe Downtown",
        "address": "108 E University Dr, Tempe, AZ 85281",
        "city": "Tempe",
        "chain_code": "CN",
        "chain_name": "Canopy",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 38765,
        "competitor_identifiers": ["TMP0005AC", "TMP0007DT", "TMP0008HH"],
        "missed_bookings": 445,
        "seed_complaints": []
    },
    {
        "identifier": "CHA0001SG",
        "name": "Sheraton Grand at Wild Horse Pass",
        "address": "5594 W Wild Horse Pass Blvd, Chandler, AZ 85048",
        "city": "Chandler",
        "chain_code": "SI",
        "chain_name": "Sheraton",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 72345,
        "competitor_identifiers": ["CHA0002CS", "CHA0003HC", "PHX0001AB"],
        "missed_bookings": 891,
        "seed_complaints": [
            "Remote location makes ride costs excessive",
            "Conference attendees frustrated with transportation",
            "Casino visitors need reliable ride options"
        ],
    },
    {
        "identifier": "CHA0002CS",
        "name": "Crowne Plaza San Marcos Resort",
        "address": "One San Marcos Place, Chandler, AZ 85224",
        "city": "Chandler",
        "chain_code": "CP",
        "chain_name": "Crowne Plaza",
        "tier": "STANDARD",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 49876,
        "competitor_identifiers": ["CHA0001SG", "CHA0003HC", "CHA0004CY"],
        "missed_bookings": 598,
        "seed_complaints": [
            "Golf groups need transportation to courses",
            "Tech conference attendees choosing other hotels"
        ],
    },
    {
        "identifier": "CHA0003HC",
        "name": "Hilton Phoenix Chandler",
        "address": "2929 W Frye Rd, Chandler, AZ 85224",
        "city": "Chandler",
        "chain_code": "HI",
        "chain_name": "Hilton",
        "tier": "BASIC",
        "monetization_status": "LOSING_MONEY",
        "monthly_revenue": 0,
        "monthly_potential": 31234,
        "competitor_identifiers": ["CHA0001SG", "CHA0002CS", "CHA0004CY"],
        "missed_bookings": 367,
        "seed_complaints": []
    },
]

# Chain code -> property codes, for search by chain
CHAIN_CODES: dict[str, list[str]] = {
    "OM": ["SCF0004OM", "TMP0001OM"],
    "FS": ["SCF0002FS"],
    "FM": ["SCF0003FM"],
    "HY": ["PHX0005HR", "PHX0013HP"],
    "HI": ["CHA0003HC"],
    "WI": ["SCF0009WK", "PHX0006WP", "TMP0004WT"],
    "SI": ["PHX0008SP", "CHA0001SG"],
    "JW": ["SCF0010JW", "PHX0003JW"],
    "AC": ["PHX0011AC", "TMP0005AC"],
    "PH": ["SCF0001PH", "PHX0013HP"],
}

# City prefixes used in property codes
CITY_PREFIXES: tuple[str, ...] = ("PHX", "SCF", "TMP", "CHA")
