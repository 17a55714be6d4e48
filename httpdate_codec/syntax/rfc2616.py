"""
Regex for RFC2616 dates

These regex are directly derived from the HTTP-date ABNF in RFC2616 section 3.3.1.

  <https://www.w3.org/Protocols/rfc2616/rfc2616-sec3.html#sec3.3.1>

They should be processed with re.VERBOSE.

The codec reads asctime dates more loosely than asctime_date: double spaces are
collapsed first, so the day of the month can be one or two digits.
"""

# pylint: disable=invalid-name

from .rfc5234 import DIGIT, SP

SPEC_URL = "https://www.w3.org/Protocols/rfc2616/rfc2616-sec3.html"

# wkday = "Mon" | "Tue" | "Wed" | "Thu" | "Fri" | "Sat" | "Sun"

wkday = r"(?: Mon | Tue | Wed | Thu | Fri | Sat | Sun )"

# weekday = "Monday" | "Tuesday" | "Wednesday" | "Thursday" | "Friday" | "Saturday" | "Sunday"

weekday = r"(?: Monday | Tuesday | Wednesday | Thursday | Friday | Saturday | Sunday )"

# month = "Jan" | "Feb" | "Mar" | "Apr" | "May" | "Jun"
#       | "Jul" | "Aug" | "Sep" | "Oct" | "Nov" | "Dec"

month = r"(?: Jan | Feb | Mar | Apr | May | Jun | Jul | Aug | Sep | Oct | Nov | Dec )"

# time = 2DIGIT ":" 2DIGIT ":" 2DIGIT

time = rf"(?: {DIGIT}{{2}} : {DIGIT}{{2}} : {DIGIT}{{2}} )"

# date1 = 2DIGIT SP month SP 4DIGIT

date1 = rf"(?: {DIGIT}{{2}} {SP} {month} {SP} {DIGIT}{{4}} )"

# date2 = 2DIGIT "-" month "-" 2DIGIT

date2 = rf"(?: {DIGIT}{{2}} \- {month} \- {DIGIT}{{2}} )"

# date3 = month SP ( 2DIGIT | ( SP 1DIGIT ))

date3 = rf"(?: {month} {SP} (?: {DIGIT}{{2}} | (?: {SP} {DIGIT} ) ) )"

# rfc1123-date = wkday "," SP date1 SP time SP "GMT"

rfc1123_date = rf"(?: {wkday} , {SP} {date1} {SP} {time} {SP} GMT )"

# rfc850-date = weekday "," SP date2 SP time SP "GMT"

rfc850_date = rf"(?: {weekday} , {SP} {date2} {SP} {time} {SP} GMT )"

# asctime-date = wkday SP date3 SP time SP 4DIGIT

asctime_date = rf"(?: {wkday} {SP} {date3} {SP} {time} {SP} {DIGIT}{{4}} )"

# HTTP-date = rfc1123-date | rfc850-date | asctime-date

HTTP_date = rf"(?: {rfc1123_date} | {rfc850_date} | {asctime_date} )"
