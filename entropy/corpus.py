"""Default blacklist corpus.

598 known-weak passwords, each at least 8 characters long. Compiled from
Twitter's disallowed passwords, the John the Ripper dictionary and the most
common RockYou passwords.
"""

DEFAULT_BLACKLIST: tuple[str, ...] = (
    "password", "computer", "internet", "baseball", "michelle", "changeme",
    "trustno1", "12345678", "butthead", "football", "iloveyou", "jennifer",
    "jonathan", "poohbear", "sunshine", "victoria", "whatever", "alexander",
    "asdfjkl;", "basketball", "elephant", "goodluck", "lacrosse", "ncc1701d",
    "shithead", "stephanie", "a1b2c3d4", "christin", "franklin", "kingfish",
    "maryjane", "maverick", "mitchell", "mountain", "pearljam", "princess",
    "startrek", "steelers", "sunflower", "superman", "babylon5", "benjamin",
    "bluebird", "chocolate", "cocacola", "einstein", "explorer", "flamingo",
    "katherine", "porsche911", "security", "snowball", "thunderbird", "training",
    "alexandr", "beautiful", "caroline", "challenge", "charlotte", "coltrane",
    "crawford", "elizabeth", "firebird", "fletcher", "fountain", "gabriell",
    "garfield", "godzilla", "grateful", "greenday", "icecream", "informix",
    "jeanette", "kathleen", "lionking", "majordomo", "margaret", "mariposa",
    "marlboro", "mercedes", "metallic", "monopoly", "ncc1701e", "nicholas",
    "penelope", "phoenix1", "remember", "republic", "research", "samantha",
    "scarlett", "snickers", "snoopdog", "spitfire", "starwars", "stingray",
    "sumuinen", "valentine", "veronica", "warriors", "zeppelin", "!@#$%^&*",
    "broadway", "raistlin", "abcd1234", "acropolis", "asdfasdf", "asdfghjk",
    "babydoll", "beatrice", "blowfish", "bluefish", "bullshit", "business",
    "california", "cannondale", "carebear", "catalina", "catherine", "champion",
    "chelsea1", "chester1", "christian", "colorado", "columbia", "commander",
    "cordelia", "creative", "danielle", "database", "deadhead", "dickhead",
    "dragonfly", "electric", "excalibur", "feedback", "francesco", "francine",
    "francois", "fuckface", "gargoyle", "goldfish", "gretchen", "harrison",
    "idontknow", "intrepid", "jethrotull", "johanna1", "jordan23", "kangaroo",
    "kimberly", "lawrence", "liverpool", "marathon", "michael1", "midnight",
    "montreal", "mortimer", "nirvana1", "notebook", "overkill", "patricia",
    "pinkfloyd", "predator", "prometheus", "rastafarian", "reynolds", "ricardo1",
    "roadrunner", "robinhood", "robotech", "rocknroll", "salasana", "sapphire",
    "scarecrow", "skywalker", "smashing", "snowflake", "strawberry", "sundance",
    "superfly", "swimming", "teddybear", "temporal", "terminal", "thejudge",
    "thursday", "valhalla", "warcraft", "williams", "windsurf", "woofwoof",
    "wrangler", "xcountry", "11111111", "88888888", "bismillah", "cardinal",
    "front242", "geronimo", "madeline", "sidekick", "sterling", "waterloo",
    "wolverine", "aardvark", "aerobics", "airborne", "allstate", "altamira",
    "anderson", "andromed", "anything", "applepie", "aquarius", "asdf1234",
    "asdf;lkj", "assmunch", "barnyard", "bernardo", "birthday", "blackjack",
    "blueeyes", "bluejean", "brewster", "butterfly", "calendar", "campbell",
    "catwoman", "chainsaw", "chameleon", "chinacat", "chouette", "chris123",
    "christmas", "christopher", "clarkson", "clueless", "concorde", "confused",
    "coolbean", "cornflake", "corvette", "crescent", "crusader", "cunningham",
    "daedalus", "damogran", "darkstar", "datatrain", "december", "deeznuts",
    "dillweed", "director", "dominique", "dontknow", "downtown", "dutchess",
    "enterprise", "fairview", "ferguson", "fireball", "fishhead", "flanders",
    "florida1", "flowerpot", "frederic", "freebird", "froggies", "frontier",
    "gammaphi", "garfunkel", "gateway2", "germany1", "gilgamesh", "halloween",
    "hallowell", "hamilton", "happy123", "happyday", "hardcore", "hawkeye1",
    "heather1", "heather2", "hedgehog", "hello123", "hellohello", "heythere",
    "highland", "histoire", "hongkong", "hosehead", "hydrogen", "indonesia",
    "instruct", "integral", "isabelle", "jamesbond", "jeepster", "jeffrey1",
    "justdoit", "justice4", "kalamazo", "katerina", "kittycat", "kristine",
    "laserjet", "lissabon", "loislane", "lonestar", "longhorn", "makeitso",
    "manageme", "marielle", "marshall", "mattingly", "meatloaf", "mechanic",
    "michigan", "microsoft", "millenium", "mobydick", "montana3", "montrose",
    "moonbeam", "morecats", "morpheus", "motorola", "munchkin", "mustang1",
    "napoleon", "national", "neutrino", "newaccount", "newyork1", "nicklaus",
    "nightshadow", "nightwind", "nintendo", "obsession", "paradigm", "patriots",
    "performa", "peterpan", "phialpha", "phillips", "pianoman", "pipeline",
    "precious", "printing", "provider", "qwerty12", "qwertyui", "rachelle",
    "redcloud", "redskins", "renegade", "revolution", "rhjrjlbk", "richard1",
    "richards", "richmond", "robotics", "rootbeer", "rossigno", "ruthless",
    "saturday", "schnapps", "scoobydoo", "scooter1", "scorpion", "september",
    "services", "shanghai", "sigmachi", "signature", "skipper1", "sprocket",
    "starbuck", "stargate", "starlight", "stranger", "student2", "superstar",
    "sweetpea", "swordfish", "tacobell", "tazdevil", "testtest", "thankyou",
    "thelorax", "thisisit", "thompson", "thrasher", "tightend", "tinkerbell",
    "transfer", "transport", "treasure", "trombone", "ultimate", "vacation",
    "vincent1", "virginia", "webmaster", "whocares", "whoville", "william1",
    "winniethepooh", "wolfgang", "xxxxxxxx", "yogibear", "00000000", "1234qwer",
    "21122112", "99999999", "anaconda", "apollo13", "blizzard", "carolina",
    "chandler", "changeit", "charlie1", "chiquita", "chocolat", "christia",
    "christoph", "classroom", "courtney", "dolphins", "fearless", "good-luck",
    "graymail", "guinness", "homebrew", "lorraine", "macintosh", "nebraska",
    "newcourt", "politics", "portland", "property", "softball", "stephani",
    "valentin", "zhongguo", "access14", "bigdaddy", "mistress", "password1",
    "password12", "password123", "redwings", "rush2112", "srinivas", "123456789",
    "babygirl", "1234567890", "987654321", "spongebob", "princesa", "alexandra",
    "estrella", "princess1", "alejandro", "brittany", "alejandra", "tequiero",
    "blink182", "fernando", "cristina", "babygurl", "november", "mahalkita",
    "gabriela", "iloveyou2", "pictures", "hellokitty", "babygirl1", "angelica",
    "iloveyou1", "inuyasha", "sebastian", "spiderman", "0123456789", "barcelona",
    "slipknot", "cutiepie", "789456123", "portugal", "volleyball", "rockstar",
    "cristian", "chrisbrown", "lollipop", "qwertyuiop", "harrypotter", "ihateyou",
    "christine", "johncena", "lovelove", "metallica", "myspace1", "babyblue",
    "fernanda", "westlife", "slideshow", "asdfghjkl", "santiago", "sweetheart",
    "12345678910", "leonardo", "sexygirl", "anthony1", "skittles", "brooklyn",
    "colombia", "christina", "teiubesc", "147258369", "francisco", "amorcito",
    "angelito", "manchester", "linkinpark", "fuckyou1", "bestfriend", "sporting",
    "truelove", "savannah", "scotland", "ilovehim", "estrellita", "brandon1",
    "loverboy", "emmanuel", "999999999", "westside", "mauricio", "preciosa",
    "shopping", "isabella", "martinez", "friendster", "valentina", "fuckyou2",
    "sunshine1", "gangster", "darkangel", "bettyboop", "jessica1", "cheyenne",
    "bestfriends", "daddysgirl", "billabong", "buttercup", "zacefron", "tokiohotel",
    "bubblegum", "darkness", "lollypop", "sexybitch", "hotstuff", "babylove",
    "angelina", "playgirl", "football1", "milagros", "margarita", "undertaker",
    "capricorn", "cheerleader", "password2", "matthew1", "carlitos", "michelle1",
    "cinderella", "jesuschrist", "ilovejesus", "tazmania", "princesita", "jesucristo",
    "lipgloss", "741852963", "hernandez", "pussycat", "gorgeous", "simpsons",
    "panthers", "hollywood", "ilovegod", "kristina", "sexymama", "scarface",
    "0987654321", "jeremiah", "pineapple", "butterfly1",
)
