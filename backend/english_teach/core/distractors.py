"""Common Hebrew words used to pad multiple-choice answers."""

_WORDS = [
    # Furniture & Home
    'שולחן', 'כיסא', 'חלון', 'דלת', 'ספר', 'עיפרון', 'מחברת', 'תיק',
    'מיטה', 'כרית', 'שמיכה', 'מזרן', 'ארון', 'מדף', 'מראה', 'שטיח',
    'מקרר', 'תנור', 'כיור', 'ברז', 'אמבטיה', 'מקלחת', 'שירותים', 'סבון',
    'מגבת', 'מברשת', 'מסרק', 'קיר', 'תקרה', 'רצפה', 'גג', 'מרפסת',
    # Nature
    'בית', 'רחוב', 'עץ', 'פרח', 'שמש', 'ירח', 'כוכב', 'ענן',
    'מים', 'אש', 'רוח', 'אדמה', 'שמיים', 'ים', 'הר', 'נהר',
    'יער', 'מדבר', 'אגם', 'מעיין', 'גשם', 'שלג', 'ברק', 'רעם',
    'קשת', 'טל', 'ערפל', 'סערה', 'חול', 'סלע', 'אבן', 'עשב',
    # Animals
    'כלב', 'חתול', 'ציפור', 'דג', 'פרפר', 'נמלה', 'דבורה', 'ארנב',
    'פיל', 'אריה', 'נמר', 'זברה', 'ג׳ירפה', 'קוף', 'דוב', 'זאב',
    'שועל', 'צב', 'נחש', 'לטאה', 'עכביש', 'זבוב', 'יתוש', 'פרה',
    'סוס', 'חמור', 'כבש', 'עז', 'תרנגול', 'ברווז', 'אווז', 'יונה',
    'עורב', 'נשר', 'ינשוף', 'תוכי', 'דולפין', 'לוויתן', 'כריש', 'צדף',
    # Family
    'אבא', 'אמא', 'אח', 'אחות', 'סבא', 'סבתא', 'דוד', 'דודה',
    'בן', 'בת', 'נכד', 'נכדה', 'חבר', 'חברה', 'שכן', 'שכנה',
    # Colors
    'אדום', 'כחול', 'ירוק', 'צהוב', 'לבן', 'שחור', 'כתום', 'סגול',
    'ורוד', 'חום', 'אפור', 'זהב', 'כסף', 'תכלת', 'טורקיז', 'בז׳',
    # Adjectives
    'גדול', 'קטן', 'יפה', 'חזק', 'מהיר', 'איטי', 'חכם', 'טוב',
    'רע', 'חדש', 'ישן', 'צעיר', 'זקן', 'גבוה', 'נמוך', 'רחב',
    'צר', 'עמוק', 'רדוד', 'חם', 'קר', 'רטוב', 'יבש', 'קשה',
    'רך', 'חלק', 'מחוספס', 'כבד', 'קל', 'מלא', 'ריק', 'פתוח',
    'סגור', 'נקי', 'מלוכלך', 'בהיר', 'כהה', 'חזק', 'חלש', 'ארוך',
    'קצר', 'עגול', 'מרובע', 'חד', 'קהה', 'מתוק', 'מלוח', 'חמוץ',
    # Food
    'אוכל', 'שתייה', 'לחם', 'חלב', 'גבינה', 'ביצה', 'תפוח', 'בננה',
    'תפוז', 'ענב', 'אבטיח', 'מלון', 'תות', 'דובדבן', 'אפרסק', 'שזיף',
    'גזר', 'מלפפון', 'עגבנייה', 'בצל', 'שום', 'תפוח אדמה', 'פלפל', 'חסה',
    'אורז', 'פסטה', 'בשר', 'עוף', 'דג', 'מרק', 'סלט', 'עוגה',
    'עוגייה', 'שוקולד', 'גלידה', 'סוכר', 'מלח', 'פלפל', 'שמן', 'חומץ',
    # Technology
    'שעון', 'טלפון', 'מחשב', 'טלוויזיה', 'רדיו', 'מנורה', 'מצלמה', 'מקלדת',
    'עכבר', 'מסך', 'אוזניות', 'רמקול', 'מטען', 'כבל', 'שלט', 'מדפסת',
    # Clothing
    'נעליים', 'חולצה', 'מכנסיים', 'כובע', 'משקפיים', 'טבעת', 'שרשרת', 'צמיד',
    'שמלה', 'חצאית', 'מעיל', 'סוודר', 'ז׳קט', 'גרביים', 'כפפות', 'צעיף',
    'חגורה', 'עניבה', 'בגד ים', 'פיג׳מה', 'כפכפים', 'מגפיים', 'סנדלים', 'תחתונים',
    # Professions
    'רופא', 'אחות', 'שוטר', 'נהג', 'טייס', 'שחקן', 'זמר', 'צייר',
    'מורה', 'מהנדס', 'עורך דין', 'שופט', 'חקלאי', 'טבח', 'אופה', 'קצב',
    'ספר', 'נגר', 'חשמלאי', 'שרברב', 'צלם', 'עיתונאי', 'סופר', 'משורר',
    # Time
    'בוקר', 'צהריים', 'ערב', 'לילה', 'יום', 'שבוע', 'חודש', 'שנה',
    'שנייה', 'דקה', 'שעה', 'אתמול', 'היום', 'מחר', 'עכשיו', 'תמיד',
    'לפעמים', 'אף פעם', 'מוקדם', 'מאוחר', 'ראשון', 'שני', 'שלישי', 'רביעי',
    # Numbers
    'אחד', 'שניים', 'שלושה', 'ארבעה', 'חמישה', 'שישה', 'שבעה', 'שמונה',
    'תשעה', 'עשר', 'עשרים', 'שלושים', 'ארבעים', 'חמישים', 'מאה', 'אלף',
    # Emotions & States
    'שמח', 'עצוב', 'כועס', 'עייף', 'רעב', 'צמא', 'חולה', 'בריא',
    'מפחד', 'אמיץ', 'גאה', 'נבוך', 'מופתע', 'משועמם', 'מתרגש', 'רגוע',
    'עצבני', 'סקרן', 'מאוהב', 'בודד', 'מאושר', 'מתוסכל', 'מבולבל', 'בטוח',
    # Body Parts
    'ראש', 'פנים', 'עין', 'אוזן', 'אף', 'פה', 'שן', 'לשון',
    'צוואר', 'כתף', 'זרוע', 'יד', 'אצבע', 'ציפורן', 'חזה', 'בטן',
    'גב', 'רגל', 'ברך', 'כף רגל', 'בוהן', 'לב', 'ריאה', 'מוח',
    # Places
    'בית ספר', 'גן', 'חנות', 'מסעדה', 'בית חולים', 'תחנה', 'שדה תעופה', 'מלון',
    'בנק', 'דואר', 'ספרייה', 'מוזיאון', 'קולנוע', 'תיאטרון', 'פארק', 'חוף',
    'הר', 'עמק', 'כפר', 'עיר', 'מדינה', 'יבשת', 'אי', 'מדרחוב',
    # Actions (as nouns)
    'הליכה', 'ריצה', 'קפיצה', 'שחייה', 'טיסה', 'נסיעה', 'קריאה', 'כתיבה',
    'ציור', 'שירה', 'ריקוד', 'משחק', 'לימוד', 'עבודה', 'מנוחה', 'שינה',
    # School
    'תלמיד', 'מורה', 'כיתה', 'לוח', 'גיר', 'מחק', 'סרגל', 'מספריים',
    'דבק', 'צבעים', 'מברשת', 'בד', 'נייר', 'מעטפה', 'בול', 'תעודה'
]

# Some words appear under several categories; keep the first occurrence.
DISTRACTOR_WORDS = tuple(dict.fromkeys(_WORDS))
