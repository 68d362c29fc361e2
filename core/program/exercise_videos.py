EXERCISE_VIDEOS: dict[str, str] = {
    # Upper Body 1
    "incline-barbell-bench-smith": "RwrLrp8dFcc",
    "dips": "Oi7npYL8vPE",
    "standing-db-lateral-raises": "0pdGWALsOMs",
    "pike-push-ups": "XckEEwa1BPI",
    "wide-grip-lat-pulldowns": "JqeZH7zC-Co",
    "barbell-bent-over-rows": "6c5hogTEDGk",
    "straight-bar-bicep-curls": "YVVGdQCM9Ss",
    "barbell-skull-crushers": "k0kV5dmMuFw",
    # Lower Body 1
    "high-bar-back-squats": "NqK95Xz1XLo",
    "front-squats-smith": "MXm6PuRB3mk",
    "leg-press": "L_bJce83XBQ",
    "dumbbell-lunges": "wq1blpqrEFY",
    "prone-leg-curls": "fF3iCzliY1E",
    "dumbbell-rdl": "7bWERGtRquU",
    "calf-raises-in": "BCoTk_ZHsCA",
    "calf-raises-out": "uyP4VIxrYKY",
    # Upper Body 2
    "flat-barbell-bench": "F85dAlCEra0",
    "pull-ups": "sWuxGz5O-QE",
    "reverse-grip-bent-rows": "heIL-Gq0L1Y",
    "seated-lateral-raises": "qNJP_MefuHc",
    "db-rear-delt-kickbacks": "Tg6OkUP2VoM",
    "chin-ups": "uxG_NTtiR1E",
    "overhead-cable-triceps": "BYKk7QvAXXE",
    "diamond-push-ups": "Scvl5pKtY_4",
    # Lower Body 2
    "front-squats-smith-day4": "MXm6PuRB3mk",
    "machine-leg-extensions": "O5NyZqgUwm8",
    "jump-squats": "WL6IYVxUoT0",
    "deadlifts": "3P8iTOXwqXU",
    "prone-leg-curls-day4": "fF3iCzliY1E",
    "calf-raises-in-day4": "BCoTk_ZHsCA",
    "calf-raises-out-day4": "uyP4VIxrYKY",
    "adductor-machine": "e9AqTFMmP18",
    # Upper Body 3
    "incline-db-bench": "d23M3gmkVPc",
    "push-ups": "KbB4foryo0k",
    "pull-ups-day5": "sWuxGz5O-QE",
    "neutral-grip-pull-ups": "cd_38C6LuvY",
    "standing-db-lateral-raises-day5": "0pdGWALsOMs",
    "wide-grip-ez-curls": "CUZUV8rDP90",
    "db-hammer-curls": "6ZT1S3K9Bsg",
    "overhead-cable-triceps-day5": "BYKk7QvAXXE",
}


def exercise_video_id(exercise_id: str) -> str | None:
    return EXERCISE_VIDEOS.get(exercise_id)
