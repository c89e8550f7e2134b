"""Recipes shipped with the app, in display order."""

SEED_RECIPES = [
    {
        "id": "1",
        "title": "עוגיות שוקולד צ'יפס",
        "description": "עוגיות רכות מבפנים ופריכות מבחוץ, עם המון שוקולד שנמס בפה.",
        "category": "אפייה",
        "difficulty": "קל",
        "timeMinutes": 30,
        "ingredients": [
            {"item": "חמאה רכה", "amount": "100 גרם"},
            {"item": "סוכר חום", "amount": "חצי כוס"},
            {"item": "ביצה", "amount": "1"},
            {"item": "קמח", "amount": "כוס וחצי"},
            {"item": "אבקת אפייה", "amount": "חצי כפית"},
            {"item": "שוקולד צ'יפס", "amount": "כוס"},
        ],
        "instructions": [
            "מבקשים ממבוגר לחמם את התנור ל-180 מעלות.",
            "מערבבים בקערה את החמאה והסוכר עד שמתקבל קרם.",
            "מוסיפים את הביצה ומערבבים.",
            "מוסיפים קמח ואבקת אפייה ומערבבים לבצק.",
            "מקפלים פנימה את השוקולד צ'יפס.",
            "יוצרים כדורים קטנים ומסדרים על תבנית עם נייר אפייה.",
            "אופים 10-12 דקות ונותנים לעוגיות להתקרר.",
        ],
        "imageUrl": "https://picsum.photos/seed/chocolate-chip-cookies/800/600",
    },
    {
        "id": "2",
        "title": "פנקייק אמריקאי",
        "description": "ערימה של פנקייקים אווריריים לארוחת בוקר חגיגית.",
        "category": "טיגון",
        "difficulty": "בינוני",
        "timeMinutes": 25,
        "ingredients": [
            {"item": "קמח", "amount": "כוס"},
            {"item": "חלב", "amount": "3/4 כוס"},
            {"item": "ביצה", "amount": "1"},
            {"item": "סוכר", "amount": "כף"},
            {"item": "אבקת אפייה", "amount": "2 כפיות"},
            {"item": "שמן", "amount": "כף"},
        ],
        "instructions": [
            "מערבבים בקערה אחת את החומרים היבשים.",
            "בקערה שנייה טורפים ביצה, חלב ושמן.",
            "מאחדים את שתי הקערות ומערבבים עד שאין גושים.",
            "מבוגר מחמם מחבת על אש בינונית.",
            "יוצקים רבע כוס בלילה ומטגנים עד שמופיעות בועות.",
            "הופכים ומטגנים עוד דקה.",
        ],
        "imageUrl": "https://picsum.photos/seed/pancakes/800/600",
    },
    {
        "id": "3",
        "title": "פסטה ברוטב עגבניות",
        "description": "ארוחת צהריים קלאסית ברוטב עגבניות ביתי ומתקתק.",
        "category": "בישול",
        "difficulty": "קל",
        "timeMinutes": 20,
        "ingredients": [
            {"item": "פסטה", "amount": "250 גרם"},
            {"item": "רסק עגבניות", "amount": "קופסה קטנה"},
            {"item": "שמן זית", "amount": "2 כפות"},
            {"item": "שום", "amount": "שן אחת"},
            {"item": "מלח", "amount": "קמצוץ"},
        ],
        "instructions": [
            "מבוגר מרתיח סיר גדול של מים עם מלח.",
            "מבשלים את הפסטה לפי ההוראות על האריזה.",
            "במחבת מחממים שמן זית ומוסיפים שום כתוש.",
            "מוסיפים רסק עגבניות וחצי כוס מים ומבשלים 5 דקות.",
            "מסננים את הפסטה ומערבבים עם הרוטב.",
        ],
        "imageUrl": "https://picsum.photos/seed/tomato-pasta/800/600",
    },
    {
        "id": "4",
        "title": "שניצל פריך",
        "description": "שניצל זהוב ופריך שכולם אוהבים.",
        "category": "טיגון",
        "difficulty": "מאתגר",
        "timeMinutes": 40,
        "ingredients": [
            {"item": "חזה עוף", "amount": "4 פרוסות"},
            {"item": "ביצים", "amount": "2"},
            {"item": "פירורי לחם", "amount": "כוס"},
            {"item": "קמח", "amount": "חצי כוס"},
            {"item": "שמן לטיגון", "amount": "לפי הצורך"},
        ],
        "instructions": [
            "מסדרים שלוש צלחות: קמח, ביצים טרופות ופירורי לחם.",
            "טובלים כל פרוסה בקמח, אחר כך בביצה ובסוף בפירורים.",
            "מבוגר מחמם שמן במחבת.",
            "מטגנים כל צד כ-3 דקות עד שהוא זהוב.",
            "מניחים על נייר סופג.",
        ],
        "imageUrl": "https://picsum.photos/seed/schnitzel/800/600",
    },
    {
        "id": "5",
        "title": "מאפינס בננה",
        "description": "מאפינס רכים וריחניים שמנצלים בננות בשלות.",
        "category": "אפייה",
        "difficulty": "קל",
        "timeMinutes": 35,
        "ingredients": [
            {"item": "בננות בשלות", "amount": "3"},
            {"item": "ביצה", "amount": "1"},
            {"item": "שמן", "amount": "שליש כוס"},
            {"item": "סוכר", "amount": "חצי כוס"},
            {"item": "קמח", "amount": "כוס וחצי"},
            {"item": "סודה לשתייה", "amount": "כפית"},
        ],
        "instructions": [
            "מבקשים ממבוגר לחמם את התנור ל-180 מעלות.",
            "מועכים את הבננות במזלג.",
            "מוסיפים ביצה, שמן וסוכר ומערבבים.",
            "מוסיפים קמח וסודה לשתייה ומערבבים בעדינות.",
            "ממלאים מנג'טים עד שני שליש.",
            "אופים 20 דקות.",
        ],
        "imageUrl": "https://picsum.photos/seed/banana-muffins/800/600",
    },
    {
        "id": "6",
        "title": "מרק ירקות צבעוני",
        "description": "מרק חם ומחבק עם כל צבעי הקשת.",
        "category": "בישול",
        "difficulty": "בינוני",
        "timeMinutes": 50,
        "ingredients": [
            {"item": "גזר", "amount": "2"},
            {"item": "תפוח אדמה", "amount": "1"},
            {"item": "קישוא", "amount": "1"},
            {"item": "בצל", "amount": "1"},
            {"item": "אבקת מרק", "amount": "כף"},
            {"item": "מים", "amount": "6 כוסות"},
        ],
        "instructions": [
            "שוטפים וקולפים את הירקות.",
            "מבוגר חותך את הירקות לקוביות.",
            "מטגנים קלות את הבצל בסיר עם מעט שמן.",
            "מוסיפים את שאר הירקות, המים ואבקת המרק.",
            "מבשלים 40 דקות על אש נמוכה.",
        ],
        "imageUrl": "https://picsum.photos/seed/vegetable-soup/800/600",
    },
    {
        "id": "7",
        "title": "לביבות תפוחי אדמה",
        "description": "לביבות חמות ופריכות, בדיוק כמו של סבתא.",
        "category": "טיגון",
        "difficulty": "מאתגר",
        "timeMinutes": 45,
        "ingredients": [
            {"item": "תפוחי אדמה", "amount": "4"},
            {"item": "בצל", "amount": "1"},
            {"item": "ביצה", "amount": "1"},
            {"item": "קמח", "amount": "3 כפות"},
            {"item": "מלח", "amount": "חצי כפית"},
            {"item": "שמן לטיגון", "amount": "לפי הצורך"},
        ],
        "instructions": [
            "מגררים תפוחי אדמה ובצל בעזרת מבוגר.",
            "סוחטים היטב את הנוזלים.",
            "מוסיפים ביצה, קמח ומלח ומערבבים.",
            "מבוגר מחמם שמן במחבת.",
            "מניחים כף מהתערובת ומשטחים.",
            "מטגנים משני הצדדים עד להזהבה.",
        ],
        "imageUrl": "https://picsum.photos/seed/potato-latkes/800/600",
    },
    {
        "id": "8",
        "title": "חביתה עם ירקות",
        "description": "חביתה צבעונית ומזינה שמוכנה בכמה דקות.",
        "category": "בישול",
        "difficulty": "קל",
        "timeMinutes": 10,
        "ingredients": [
            {"item": "ביצים", "amount": "2"},
            {"item": "עגבנייה", "amount": "חצי"},
            {"item": "פלפל אדום", "amount": "רבע"},
            {"item": "מלח", "amount": "קמצוץ"},
        ],
        "instructions": [
            "טורפים את הביצים בקערה.",
            "חותכים ירקות לקוביות קטנות ומוסיפים.",
            "מבוגר מחמם מחבת עם מעט שמן.",
            "יוצקים את התערובת ומבשלים עד שהחביתה יציבה.",
        ],
        "imageUrl": "https://picsum.photos/seed/veggie-omelette/800/600",
    },
]
