"""Static question banks used to synthesize quizzes without the AI backend.

Topic banks are Spanish-only and matched by substring against the topic.
Generic banks are templates filled with the requested topic.
"""

# (question, expected answer)
TOPIC_BANKS_ES: dict[str, list[tuple[str, str]]] = {
    "fotosíntesis": [
        ("¿Qué es la fotosíntesis?",
         "La fotosíntesis es el proceso mediante el cual las plantas, algas y algunas bacterias transforman la energía luminosa del sol en energía química (glucosa), utilizando agua y dióxido de carbono, y liberando oxígeno."),
        ("¿Cuál es la ecuación general de la fotosíntesis?",
         "La ecuación es: 6CO₂ + 6H₂O + luz solar → C₆H₁₂O₆ + 6O₂. Seis moléculas de dióxido de carbono más seis de agua, con luz, producen una molécula de glucosa y seis de oxígeno."),
        ("¿Dónde ocurre la fotosíntesis en las plantas?",
         "Ocurre principalmente en las hojas, dentro de orgánulos llamados cloroplastos, que contienen clorofila, el pigmento verde que captura la luz solar."),
        ("¿Qué es la clorofila y cuál es su función?",
         "La clorofila es un pigmento verde presente en los cloroplastos. Absorbe la luz solar (principalmente roja y azul) y la convierte en energía química para la fotosíntesis."),
        ("¿Cuáles son los reactivos de la fotosíntesis?",
         "Dióxido de carbono (CO₂), que entra por los estomas; agua (H₂O), que sube por las raíces y el tallo; y luz solar, captada por la clorofila."),
        ("¿Cuáles son los productos de la fotosíntesis?",
         "Glucosa (C₆H₁₂O₆), que la planta usa como fuente de energía y para construir estructuras, y oxígeno (O₂), que se libera a la atmósfera por los estomas."),
        ("¿Por qué la fotosíntesis es importante para la vida en la Tierra?",
         "Produce el oxígeno que respiran la mayoría de los seres vivos y es la base de las cadenas alimenticias, ya que las plantas producen el alimento que luego consumen los animales."),
        ("¿Qué son los estomas?",
         "Son pequeños poros en la superficie de las hojas que permiten el intercambio de gases: el CO₂ entra y el O₂ y el vapor de agua salen."),
        ("¿Qué factores afectan la velocidad de la fotosíntesis?",
         "La intensidad de la luz, la concentración de CO₂, la temperatura y la disponibilidad de agua."),
        ("¿Cuál es la diferencia entre la fase luminosa y la fase oscura?",
         "La fase luminosa ocurre en los tilacoides y produce ATP y O₂ a partir de la luz. La fase oscura (ciclo de Calvin) ocurre en el estroma y usa ese ATP para fijar CO₂ y formar glucosa."),
        ("¿Qué pasaría si no existiera la fotosíntesis?",
         "No habría oxígeno en la atmósfera para respirar ni alimento para los herbívoros; la vida como la conocemos no podría existir."),
        ("¿Las plantas también respiran?",
         "Sí, respiran día y noche consumiendo O₂ y liberando CO₂. Durante el día la fotosíntesis produce más O₂ del que consumen, por eso liberan oxígeno."),
        ("¿Por qué las hojas son generalmente verdes?",
         "Porque la clorofila refleja la luz verde y absorbe las luces roja y azul."),
        ("¿Pueden hacer fotosíntesis organismos que no son plantas?",
         "Sí, las algas y algunas bacterias (cianobacterias) también realizan fotosíntesis y aportan gran parte del oxígeno atmosférico."),
        ("¿Qué rol juegan las hojas en la fotosíntesis?",
         "Son el órgano principal de la fotosíntesis: su forma plana maximiza la captura de luz, los estomas permiten el intercambio de gases y las nervaduras transportan agua y nutrientes."),
    ],
    "célula": [
        ("¿Qué es una célula?",
         "La célula es la unidad básica estructural y funcional de todos los seres vivos, la parte más pequeña capaz de realizar las funciones vitales."),
        ("¿Cuáles son las partes principales de una célula?",
         "Membrana celular, citoplasma y núcleo. Las células vegetales también tienen pared celular y cloroplastos."),
        ("¿Cuál es la diferencia entre célula animal y célula vegetal?",
         "La célula vegetal tiene pared celular, cloroplastos y una gran vacuola central; la animal no tiene estas estructuras pero posee centriolos."),
        ("¿Qué función cumple el núcleo de la célula?",
         "Es el centro de control: contiene el ADN que dirige las actividades celulares y permite la reproducción celular."),
        ("¿Qué es la membrana celular y cuál es su función?",
         "Es una capa delgada que rodea la célula, la protege y controla qué sustancias entran y salen."),
        ("¿Qué son las mitocondrias y para qué sirven?",
         "Son las centrales de energía de la célula: realizan la respiración celular y transforman los nutrientes en ATP."),
        ("¿Qué función cumplen los cloroplastos?",
         "Presentes solo en células vegetales, contienen clorofila y realizan la fotosíntesis."),
        ("¿Qué es el citoplasma?",
         "Una sustancia gelatinosa que llena el interior de la célula, donde flotan los orgánulos y ocurren muchas reacciones químicas."),
        ("¿Qué tipos de células existen según su complejidad?",
         "Procariotas, sin núcleo definido (bacterias), y eucariotas, con núcleo y orgánulos (animales, plantas y hongos)."),
        ("¿Cómo se reproducen las células?",
         "Por división celular: la mitosis produce dos células hijas idénticas y la meiosis produce células reproductoras con la mitad del material genético."),
        ("¿Por qué se dice que la célula es la unidad de vida?",
         "Porque todos los seres vivos están formados por células y en ellas se realizan todas las funciones vitales."),
        ("¿Qué es el ADN y dónde se encuentra?",
         "Es la molécula que contiene la información genética; en las células eucariotas se encuentra en el núcleo, organizada en cromosomas."),
        ("¿Qué función cumple el retículo endoplasmático?",
         "El rugoso sintetiza proteínas y el liso sintetiza lípidos y ayuda a eliminar toxinas."),
        ("¿Qué son los ribosomas?",
         "Pequeños orgánulos que fabrican proteínas siguiendo las instrucciones copiadas del ADN."),
        ("¿Qué es el aparato de Golgi?",
         "Un orgánulo de sacos aplanados que modifica, empaqueta y distribuye las proteínas recibidas del retículo endoplasmático."),
    ],
}

GENERIC_ES: list[tuple[str, str]] = [
    ("¿Qué es {topic} y por qué es importante estudiarlo?",
     "{Topic} es un tema fundamental que permite comprender conceptos esenciales. Su estudio desarrolla habilidades de análisis y comprensión del mundo que nos rodea."),
    ("¿Cuáles son los conceptos principales de {topic}?",
     "Los conceptos principales incluyen las definiciones básicas, las características distintivas, los ejemplos más representativos y las aplicaciones prácticas en situaciones reales."),
    ("¿Cómo se relaciona {topic} con la vida cotidiana?",
     "{Topic} tiene aplicaciones directas en la vida diaria. Comprender este tema nos ayuda a tomar mejores decisiones y entender fenómenos que observamos regularmente."),
    ("Describe las características más importantes de {topic}.",
     "Las características más importantes incluyen sus propiedades fundamentales, cómo se identifica, sus componentes principales y qué lo diferencia de conceptos similares."),
    ("Menciona y explica tres ejemplos relacionados con {topic}.",
     "Ejemplos relevantes pueden incluir casos del entorno escolar, situaciones familiares y fenómenos naturales observables."),
    ("¿Por qué es importante conocer sobre {topic}?",
     "Conocer sobre {topic} desarrolla el pensamiento crítico, permite resolver problemas reales y facilita la comprensión de temas más avanzados."),
    ("¿Cómo explicarías {topic} a alguien que no lo conoce?",
     "Se debe partir de ideas simples, usar ejemplos concretos y cotidianos, y relacionarlo con experiencias que la persona ya conoce."),
    ("¿Qué preguntas te surgen al estudiar {topic}?",
     "Pueden surgir preguntas sobre su origen, cómo funciona, para qué sirve, cómo se aplica y cómo se relaciona con otros conocimientos previos."),
    ("Compara {topic} con otro tema que hayas estudiado.",
     "Al comparar temas se pueden identificar similitudes en sus principios básicos, diferencias en sus aplicaciones y conexiones que enriquecen la comprensión de ambos."),
    ("¿Cuál es la idea más importante que aprendiste sobre {topic}?",
     "Comprender los fundamentos del tema, reconocer su utilidad práctica y ser capaz de aplicar este conocimiento en situaciones nuevas."),
    ("¿Cómo puedes aplicar lo aprendido sobre {topic}?",
     "En actividades escolares, proyectos personales, resolución de problemas cotidianos y en la comprensión de noticias o información relacionada."),
    ("Resume con tus propias palabras qué es {topic}.",
     "Un buen resumen debe incluir una definición clara, las características principales, por qué es importante y uno o dos ejemplos que ilustren el concepto."),
    ("¿Qué dificultades encontraste al estudiar {topic}?",
     "Las dificultades comunes incluyen entender la terminología nueva, conectar diferentes conceptos entre sí y visualizar cómo se aplica el conocimiento en la práctica."),
    ("¿Qué más te gustaría aprender sobre {topic}?",
     "Se puede profundizar estudiando casos especiales, investigando la historia del tema, explorando aplicaciones avanzadas y descubriendo temas relacionados."),
    ("Crea un ejemplo original relacionado con {topic}.",
     "Un buen ejemplo original demuestra comprensión del tema, es relevante y muestra correctamente los conceptos aprendidos en una situación nueva."),
]

GENERIC_EN: list[tuple[str, str]] = [
    ("What is {topic} and why is it important to study?",
     "{Topic} is a fundamental topic that helps understand essential concepts. Studying it develops analysis skills and understanding of the world around us."),
    ("What are the main concepts of {topic}?",
     "The main concepts include basic definitions, distinctive characteristics, representative examples, and practical applications in real situations."),
    ("How does {topic} relate to everyday life?",
     "{Topic} has direct applications in daily life. Understanding it helps us make better decisions and comprehend phenomena we observe regularly."),
    ("Describe the most important characteristics of {topic}.",
     "They include its fundamental properties, how it is identified, its main components, and what differentiates it from similar concepts."),
    ("Mention and explain three examples related to {topic}.",
     "Relevant examples can include cases from school, family situations, and observable natural phenomena."),
    ("Why is it important to know about {topic}?",
     "Knowing about {topic} develops critical thinking, allows solving real problems, and facilitates understanding of related advanced topics."),
    ("How would you explain {topic} to someone unfamiliar with it?",
     "Start with simple ideas, use concrete everyday examples, and relate it to experiences the person already knows."),
    ("What questions arise when studying {topic}?",
     "Questions may arise about its origin, how it works, what it is used for, how it is applied, and how it relates to prior knowledge."),
    ("Compare {topic} with another topic you have studied.",
     "You can identify similarities in basic principles, differences in applications, and connections that enrich understanding of both."),
    ("What is the most important idea you learned about {topic}?",
     "Understanding the fundamentals, recognizing practical utility, and being able to apply this knowledge in new situations."),
    ("How can you apply what you learned about {topic}?",
     "In school activities, personal projects, solving everyday problems, and understanding related news or information."),
    ("Summarize in your own words what {topic} is.",
     "A good summary includes a clear definition, main characteristics, why it is important, and one or two examples that illustrate the concept."),
    ("What difficulties did you encounter when studying {topic}?",
     "Common difficulties include understanding new terminology, connecting different concepts, and visualizing how knowledge applies in practice."),
    ("What else would you like to learn about {topic}?",
     "You can go deeper by studying special cases, researching the topic's history, exploring advanced applications, and discovering related topics."),
    ("Create an original example related to {topic}.",
     "A good original example demonstrates understanding of the topic, is relevant, and correctly shows learned concepts in a new situation."),
]


def find_topic_bank(topic: str) -> list[tuple[str, str]] | None:
    """Return the Spanish bank whose key matches ``topic`` (either direction), if any."""
    needle = topic.strip().casefold()
    if not needle:
        return None
    for key, questions in TOPIC_BANKS_ES.items():
        if key in needle or needle in key:
            return questions
    return None
