"""Default fishing spot catalog for Brevard County, Florida."""

from fishcast.config.schema import SpotConfig
from fishcast.models.common import Species, TidePreference

DEFAULT_SPOTS: list[SpotConfig] = [
    SpotConfig(
        id="sebastian-inlet",
        name="Sebastian Inlet",
        lat=27.8603,
        lng=-80.4473,
        species=[Species.SNOOK, Species.REDFISH, Species.TARPON],
        description=(
            "Rock jetties and a deep channel where the lagoon drains into the "
            "Atlantic. Strong current funnels bait past the tips of both jetties."
        ),
        features=["jetty", "inlet", "channel", "rocks"],
        tide_preference=TidePreference.OUTGOING,
        tips=[
            "Fish the north jetty tip on the first two hours of the outgoing tide.",
            "Live pinfish or pigfish drifted along the rocks for snook.",
        ],
    ),
    SpotConfig(
        id="mosquito-lagoon",
        name="Mosquito Lagoon",
        lat=28.8500,
        lng=-80.7800,
        species=[Species.REDFISH, Species.SPECKLED_TROUT, Species.BLACK_DRUM],
        description=(
            "Shallow, clear grass flats famous for tailing redfish. Very little "
            "tide; water level follows the wind."
        ),
        features=["flats", "grass", "sight fishing"],
        tide_preference=TidePreference.INCOMING,
        tips=[
            "Pole the shoreline at first light looking for tailing reds.",
            "Soft plastics on a light jighead; keep casts long and quiet.",
        ],
    ),
    SpotConfig(
        id="haulover-canal",
        name="Haulover Canal",
        lat=28.7360,
        lng=-80.7550,
        species=[Species.BLACK_DRUM, Species.REDFISH, Species.TARPON],
        description=(
            "Narrow canal joining Mosquito Lagoon and the Indian River. Manatees, "
            "rolling tarpon in summer and big drum along the walls."
        ),
        features=["canal", "bridge", "deep water"],
        tide_preference=TidePreference.INCOMING,
        tips=[
            "Work the seawalls near the bridge with crab or shrimp on the bottom.",
            "Summer mornings bring rolling tarpon at the east mouth.",
        ],
    ),
    SpotConfig(
        id="port-canaveral-jetty",
        name="Port Canaveral Jetty",
        lat=28.4079,
        lng=-80.5903,
        species=[Species.SNOOK, Species.TARPON, Species.REDFISH],
        description=(
            "Jetty Park's south jetty at the port entrance. Ocean water and "
            "true tidal flow; a fall run hot spot."
        ),
        features=["jetty", "inlet", "rocks", "pier"],
        tide_preference=TidePreference.INCOMING,
        tips=[
            "Clean incoming water brings bait and snook to the jetty rocks.",
            "Bucktail jigs bounced off the bottom along the channel edge.",
        ],
    ),
    SpotConfig(
        id="banana-river-nmz",
        name="Banana River No Motor Zone",
        lat=28.4800,
        lng=-80.6300,
        species=[Species.REDFISH, Species.BLACK_DRUM, Species.SPECKLED_TROUT],
        description=(
            "Paddle-only section of the Banana River with skinny water and big "
            "schooling redfish."
        ),
        features=["flats", "grass", "paddle only"],
        tide_preference=TidePreference.INCOMING,
        tips=[
            "Launch from the causeway and paddle north along the east shoreline.",
            "Look for pushes and wakes; slot and oversized reds school here.",
        ],
    ),
    SpotConfig(
        id="cocoa-beach-pier",
        name="Cocoa Beach Pier",
        lat=28.3680,
        lng=-80.6010,
        species=[Species.TARPON, Species.SNOOK],
        description="800-foot ocean pier with surf, troughs and passing bait pods.",
        features=["pier", "surf", "ocean"],
        tide_preference=TidePreference.INCOMING,
        tips=[
            "Watch for mullet schools in the fall and fish their edges.",
            "Fish the end of the pier for tarpon following the bait.",
        ],
    ),
    SpotConfig(
        id="thousand-islands",
        name="Thousand Islands",
        lat=28.3000,
        lng=-80.6200,
        species=[Species.SNOOK, Species.REDFISH, Species.SPECKLED_TROUT],
        description=(
            "Mangrove islands and oyster bars on the Banana River behind "
            "Cocoa Beach."
        ),
        features=["mangroves", "oyster", "shoreline"],
        tide_preference=TidePreference.OUTGOING,
        tips=[
            "Skip lures under the mangrove overhangs for snook.",
            "Falling water pulls bait off the oyster bars into the cuts.",
        ],
    ),
    SpotConfig(
        id="pineda-causeway",
        name="Pineda Causeway",
        lat=28.2100,
        lng=-80.6400,
        species=[Species.SNOOK, Species.BLACK_DRUM, Species.SPECKLED_TROUT],
        description="Bridge pilings and dock lights across the Indian River.",
        features=["bridge", "dock lights", "channel"],
        tide_preference=TidePreference.OUTGOING,
        tips=[
            "Night fishing under the lights for snook and trout.",
            "Drum stack up on the pilings in late winter.",
        ],
    ),
    SpotConfig(
        id="eau-gallie-causeway",
        name="Eau Gallie Causeway",
        lat=28.1300,
        lng=-80.6200,
        species=[Species.BLACK_DRUM, Species.REDFISH, Species.SNOOK],
        description="Causeway spoil islands and fishing catwalks over the lagoon.",
        features=["bridge", "spoil islands", "catwalk"],
        tide_preference=TidePreference.OUTGOING,
        tips=[
            "Fish the drop-off along the spoil islands with cut mullet.",
            "Fresh shrimp on the bottom near the bridge fenders for drum.",
        ],
    ),
    SpotConfig(
        id="melbourne-causeway",
        name="Melbourne Causeway",
        lat=28.0800,
        lng=-80.6000,
        species=[Species.SPECKLED_TROUT, Species.REDFISH, Species.SNOOK],
        description="Grass beds and sand holes on both sides of the causeway.",
        features=["grass", "sand holes", "bridge"],
        tide_preference=TidePreference.INCOMING,
        tips=[
            "Topwater plugs over the grass at dawn for gator trout.",
            "Sand holes hold reds on bright afternoons.",
        ],
    ),
]
