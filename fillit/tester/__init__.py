"""Random map generation and side-by-side testing of fillit programs."""