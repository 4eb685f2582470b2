"""Small character, number and string helpers."""