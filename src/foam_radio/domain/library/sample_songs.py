"""Built-in catalog used when no catalog file is configured."""

from .models import Song

SAMPLE_SONGS: tuple[Song, ...] = (
    Song(
        id="1",
        title="Call Me Mrs. Sprayfoam",
        artist="DJ FoamBot Productions",
        genre="Jingle/Commercial",
        duration=170,
        plays=12450,
        src="/music/Call-Me-Mrs.Sprayfoam.mp3",
    ),
    Song(
        id="2",
        title="Let It Foam",
        artist="DJ FoamBot Productions feat. Mrs. SprayFoam",
        genre="Parody/Pop",
        duration=200,
        plays=15670,
        src="/music/Mrs. SprayFoam Let It Foam.mp3",
    ),
    Song(
        id="3",
        title="Espuma y Calidez 2",
        artist="DJ FoamBot Productions",
        genre="Latin/Pop",
        duration=245,
        plays=8920,
        src="/music/Espuma-Calidez-2.mp3",
    ),
    Song(
        id="4",
        title="Foam Everything",
        artist="DJ FoamBot Productions",
        genre="Anthem/Rock",
        duration=100,
        plays=9340,
        src="/music/Foam-Everything.mp3",
    ),
    Song(
        id="5",
        title="Foam It - We Insulate You Right",
        artist="DJ FoamBot Productions",
        genre="Commercial/Jingle",
        duration=100,
        plays=7890,
        src="/music/Foam-It-we-insulate-you-right.mp3",
    ),
    Song(
        id="6",
        title="Hey Diddle Diddle",
        artist="DJ FoamBot Productions",
        genre="Novelty/Fun",
        duration=164,
        plays=11200,
        src="/music/Hey-Diddle-Diddle.mp3",
    ),
    Song(
        id="7",
        title="OG Polyurethane Gang",
        artist="DJ FoamBot Productions",
        genre="Hip-Hop",
        duration=68,
        plays=6540,
        src="/music/OG-Polyurthane-gang.mp3",
    ),
    Song(
        id="8",
        title="Polyurethane Gang",
        artist="DJ FoamBot Productions",
        genre="Hip-Hop",
        duration=67,
        plays=18900,
        src="/music/Polyurethane-Gang.mp3",
    ),
    Song(
        id="9",
        title="Comfy Life (Spanish Version)",
        artist="DJ FoamBot Productions",
        genre="Latin/Pop",
        duration=245,
        plays=14320,
        src="/music/Spanish-ComfyLife.mp3",
    ),
    Song(
        id="10",
        title="Spray Foam Party (Snoop Style)",
        artist="DJ FoamBot Productions",
        genre="Hip-Hop/G-Funk",
        duration=167,
        plays=10780,
        src="/music/sprayfoam-party-with-Snoop-Dogg.mp3",
    ),
    Song(
        id="11",
        title="Spray Foam Tip Blues",
        artist="DJ FoamBot Productions",
        genre="Blues",
        duration=96,
        plays=8650,
        src="/music/Spray-Foam_tip_blues.mp3",
    ),
    Song(
        id="12",
        title="Spray Foam Warmth",
        artist="DJ FoamBot Productions",
        genre="Novelty",
        duration=116,
        plays=13450,
        src="/music/Spray-Foam-Warmth.mp3",
    ),
    Song(
        id="13",
        title="Spray Foam Radio Anthem",
        artist="DJ FoamBot Productions",
        genre="Electronic",
        duration=40,
        plays=9200,
        src="/music/SprayFoamRadio Intro.mp3",
    ),
    Song(
        id="14",
        title="Spray Foam Radio: Broadcast From the Shadows",
        artist="DJ FoamBot Productions",
        genre="Experimental Electronic",
        duration=39,
        plays=7500,
        src="/music/SprayFoamRadio-Intro-1.mp3",
    ),
    Song(
        id="15",
        title="Foambot's Master Plan",
        artist="DJ FoamBot Productions",
        genre="Hip-Hop",
        duration=154,
        plays=11800,
        src="/music/SprayFoam Radio Ad foambot master plan.mp3",
    ),
    Song(
        id="16",
        title="DJ Phombod's Hip Hop Radio Anthem",
        artist="DJ FoamBot Productions",
        genre="Hip-Hop",
        duration=38,
        plays=6300,
        src="/music/SprayFoam-Radio-Ad-2.mp3",
    ),
    Song(
        id="17",
        title="Break Phone Radio: DJ Fonbob's Hip Hop Anthem",
        artist="DJ FoamBot Productions",
        genre="Hip-Hop",
        duration=41,
        plays=5800,
        src="/music/SprayFoam Radio Ad.mp3",
    ),
    Song(
        id="18",
        title="Spray Foam Radio: DJ Foam Bot's Hottest Hits",
        artist="DJ FoamBot Productions",
        genre="Hip-Hop",
        duration=33,
        plays=7100,
        src="/music/SprayFoam Radio Ad with DJ Foam Bot.mp3",
    ),
    Song(
        id="19",
        title="Spray Foam Radio: DJ Foambot's Anthem",
        artist="DJ FoamBot Productions",
        genre="Hip-Hop",
        duration=24,
        plays=4500,
        src="/music/SprayFoam Radio Ad_ DJ Foam Bot.mp3",
    ),
    Song(
        id="20",
        title="Ink Flow Empire",
        artist="DJ FoamBot Productions feat. Foam Swag",
        genre="Hip-Hop",
        duration=83,
        plays=8900,
        src="/music/Foam Guns for Hire.mp3",
    ),
    Song(
        id="21",
        title="Sprayfoam Supreme",
        artist="DJ FoamBot",
        genre="Electronic/DJ Skit",
        duration=152,
        plays=12300,
        src="/music/Sprayfoam Supreme.mp3",
    ),
    Song(
        id="22",
        title="Spray Foam Cowboy v1",
        artist="DJ FoamBot Productions",
        genre="Country",
        duration=180,
        plays=16500,
        src="/music/sprayfoam-cowboy-v1.mp3",
    ),
    Song(
        id="23",
        title="Spray Foam Cowboy v2",
        artist="DJ FoamBot Productions",
        genre="Country",
        duration=165,
        plays=14200,
        src="/music/sprayfoam-cowboy-v2.mp3",
    ),
    Song(
        id="24",
        title="Seal It Up",
        artist="DJ FoamBot Productions",
        genre="Electronic",
        duration=154,
        plays=9800,
        src="/music/Seal it up.mp3",
    ),
    Song(
        id="25",
        title="The Spray Foam Marksman",
        artist="DJ FoamBot Productions feat. On the Mark Spray Foam",
        genre="Indie Rock",
        duration=122,
        plays=11500,
        src="/music/The Spray Foam Marksman.mp3",
    ),
    Song(
        id="26",
        title="Iso Stains (ALLSTATE Anthem)",
        artist="DJ FoamBot Productions feat. Allstate Spray Foam",
        genre="Commercial/Jingle",
        duration=115,
        plays=10200,
        src="/music/Iso-Stains-ALLSTATE.mp3",
    ),
    Song(
        id="27",
        title="Cali Foam Dreams (Allstate Sprayfoam)",
        artist="DJ FoamBot Productions feat. Allstate Spray Foam",
        genre="Commercial/Jingle",
        duration=120,
        plays=9600,
        src="/music/Cali-Foam-Dreams-Allstate-Sprayfoam.mp3",
    ),
    Song(
        id="28",
        title="Foam is my fav F-word",
        artist="DJ FoamBot Productions",
        genre="Hip-Hop",
        duration=92,
        plays=8400,
        src="/music/Foam-is-my-fav-F-word.mp3",
    ),
)
