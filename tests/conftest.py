import pytest

from vigenere_es.core.config import get_settings
from vigenere_es.services.alphabet import is_symbol

QUIJOTE = (
    "EN UN LUGAR DE LA MANCHA, DE CUYO NOMBRE NO QUIERO ACORDARME, NO HA MUCHO "
    "TIEMPO QUE VIVIA UN HIDALGO DE LOS DE LANZA EN ASTILLERO, ADARGA ANTIGUA, "
    "ROCIN FLACO Y GALGO CORREDOR. UNA OLLA DE ALGO MAS VACA QUE CARNERO, "
    "SALPICON LAS MAS NOCHES, DUELOS Y QUEBRANTOS LOS SABADOS, LENTEJAS LOS "
    "VIERNES, ALGUN PALOMINO DE AÑADIDURA LOS DOMINGOS, CONSUMIAN LAS TRES "
    "PARTES DE SU HACIENDA. EL RESTO DELLA CONCLUIAN SAYO DE VELARTE, CALZAS DE "
    "VELLUDO PARA LAS FIESTAS CON SUS PANTUFLOS DE LO MISMO, Y LOS DIAS DE "
    "ENTRE SEMANA SE HONRABA CON SU VELLORI DE LO MAS FINO. TENIA EN SU CASA UNA "
    "AMA QUE PASABA DE LOS CUARENTA, Y UNA SOBRINA QUE NO LLEGABA A LOS VEINTE, "
    "Y UN MOZO DE CAMPO Y PLAZA, QUE ASI ENSILLABA EL ROCIN COMO TOMABA LA "
    "PODADERA. FRISABA LA EDAD DE NUESTRO HIDALGO CON LOS CINCUENTA AÑOS; ERA DE "
    "COMPLEXION RECIA, SECO DE CARNES, ENJUTO DE ROSTRO, GRAN MADRUGADOR Y AMIGO "
    "DE LA CAZA. QUIEREN DECIR QUE TENIA EL SOBRENOMBRE DE QUIJADA, O QUESADA, "
    "QUE EN ESTO HAY ALGUNA DIFERENCIA EN LOS AUTORES QUE DESTE CASO ESCRIBEN; "
    "AUNQUE POR CONJETURAS VEROSIMILES SE DEJA ENTENDER QUE SE LLAMABA QUEJANA. "
    "PERO ESTO IMPORTA POCO A NUESTRO CUENTO; BASTA QUE EN LA NARRACION DEL NO SE "
    "SALGA UN PUNTO DE LA VERDAD. ES, PUES, DE SABER, QUE ESTE SOBREDICHO "
    "HIDALGO, LOS RATOS QUE ESTABA OCIOSO, QUE ERAN LOS MAS DEL AÑO, SE DABA A "
    "LEER LIBROS DE CABALLERIAS CON TANTA AFICION Y GUSTO, QUE OLVIDO CASI DE "
    "TODO PUNTO EL EJERCICIO DE LA CAZA, Y AUN LA ADMINISTRACION DE SU HACIENDA; "
    "Y LLEGO A TANTO SU CURIOSIDAD Y DESATINO EN ESTO, QUE VENDIO MUCHAS HANEGAS "
    "DE TIERRA DE SEMBRADURA PARA COMPRAR LIBROS DE CABALLERIAS EN QUE LEER, Y "
    "ASI LLEVO A SU CASA TODOS CUANTOS PUDO HABER DELLOS; Y DE TODOS, NINGUNOS LE "
    "PARECIAN TAN BIEN COMO LOS QUE COMPUSO EL FAMOSO FELICIANO DE SILVA, PORQUE "
    "LA CLARIDAD DE SU PROSA Y AQUELLAS ENTRICADAS RAZONES SUYAS LE PARECIAN DE "
    "PERLAS, Y MAS CUANDO LLEGABA A LEER AQUELLOS REQUIEBROS Y CARTAS DE "
    "DESAFIOS, DONDE EN MUCHAS PARTES HALLABA ESCRITO: LA RAZON DE LA SINRAZON "
    "QUE A MI RAZON SE HACE, DE TAL MANERA MI RAZON ENFLAQUECE, QUE CON RAZON ME "
    "QUEJO DE LA VUESTRA FERMOSURA. Y TAMBIEN CUANDO LEIA: LOS ALTOS CIELOS QUE "
    "DE VUESTRA DIVINIDAD DIVINAMENTE CON LAS ESTRELLAS OS FORTIFICAN, Y OS HACEN "
    "MERECEDORA DEL MERECIMIENTO QUE MERECE LA VUESTRA GRANDEZA. CON ESTAS "
    "RAZONES PERDIA EL POBRE CABALLERO EL JUICIO, Y DESVELABASE POR ENTENDERLAS "
    "Y DESENTRAÑARLES EL SENTIDO, QUE NO SE LO SACARA NI LAS ENTENDIERA EL MESMO "
    "ARISTOTELES, SI RESUCITARA PARA SOLO ELLO. NO ESTABA MUY BIEN CON LAS "
    "HERIDAS QUE DON BELIANIS DABA Y RECEBIA, PORQUE SE IMAGINABA QUE, POR "
    "GRANDES MAESTROS QUE LE HUBIESEN CURADO, NO DEJARIA DE TENER EL ROSTRO Y "
    "TODO EL CUERPO LLENO DE CICATRICES Y SEÑALES. PERO, CON TODO, ALABABA EN SU "
    "AUTOR AQUEL ACABAR SU LIBRO CON LA PROMESA DE AQUELLA INACABABLE AVENTURA, Y "
    "MUCHAS VECES LE VINO DESEO DE TOMAR LA PLUMA Y DALLE FIN AL PIE DE LA LETRA "
    "COMO ALLI SE PROMETE; Y SIN DUDA ALGUNA LO HICIERA, Y AUN SALIERA CON ELLO, "
    "SI OTROS MAYORES Y CONTINUOS PENSAMIENTOS NO SE LO ESTORBARAN."
)


@pytest.fixture
def spanish_text():
    """Spanish prose with natural letter distribution, over 2000 letters."""
    return QUIJOTE


@pytest.fixture
def spanish_letters(spanish_text):
    """The Spanish prose reduced to alphabet symbols."""
    return "".join(c for c in spanish_text if is_symbol(c))


@pytest.fixture
def isolated_settings(monkeypatch, tmp_path):
    """Point the settings at a throwaway SQLite database."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("APP_ENV", "production")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
