# app/fallback.py
# Shown by the page whenever /api/roast fails or comes back empty.
FALLBACK_ROASTS = (
    "This person looks like they debug code by changing random variables until it works.",
    "Bro really said 'let me take a selfie' and forgot to install confidence.exe first.",
    "Looking like a Stack Overflow question that nobody wants to answer.",
    "This is what happens when you order charisma from AliExpress.",
    "Face.exe has stopped working. Would you like to restart?",
    "This person definitely uses Internet Explorer by choice.",
)
